"""Textbook curriculum content."""
from typing import Dict, List

from aidu.models.content_models import (
    Grade,
    GrammarExample,
    GrammarSection,
    Phrase,
    ReadingSection,
    SchoolLevel,
    TextbookUnit,
    Word,
)

GRADES: List[Grade] = [
    Grade("middle-1", "중학교 1학년", "중1", SchoolLevel.MIDDLE, 1, 10),
    Grade("middle-2", "중학교 2학년", "중2", SchoolLevel.MIDDLE, 2, 10),
    Grade("middle-3", "중학교 3학년", "중3", SchoolLevel.MIDDLE, 3, 10, is_mock=True),
    Grade("high-1", "고등학교 1학년", "고1", SchoolLevel.HIGH, 4, 12, is_mock=True),
    Grade("high-2", "고등학교 2학년", "고2", SchoolLevel.HIGH, 5, 12, is_mock=True),
    Grade("high-3", "고등학교 3학년", "고3", SchoolLevel.HIGH, 6, 12, is_mock=True),
]


def _word(n: int, english: str, korean: str, sentence: str, translation: str, pos: str) -> Word:
    return Word(
        id=f"m1-l1-w{n}",
        english=english,
        korean=korean,
        example_sentence=sentence,
        example_translation=translation,
        difficulty="basic",
        part_of_speech=pos,
    )


MIDDLE_1_LESSON_1_WORDS: List[Word] = [
    _word(1, "wake up", "일어나다", "I wake up at 7 every morning.", "나는 매일 아침 7시에 일어난다.", "verb"),
    _word(2, "brush", "(양치/빗질을) 하다", "I brush my teeth twice a day.", "나는 하루에 두 번 양치를 한다.", "verb"),
    _word(3, "breakfast", "아침식사", "I eat breakfast with my family.", "나는 가족과 함께 아침을 먹는다.", "noun"),
    _word(4, "school", "학교", "I go to school by bus.", "나는 버스로 학교에 간다.", "noun"),
    _word(5, "lunch", "점심식사", "We have lunch at 12:30.", "우리는 12시 30분에 점심을 먹는다.", "noun"),
    _word(6, "study", "공부하다", "I study English every day.", "나는 매일 영어를 공부한다.", "verb"),
    _word(7, "homework", "숙제", "I do my homework after school.", "나는 방과 후에 숙제를 한다.", "noun"),
    _word(8, "dinner", "저녁식사", "We have dinner at 7 PM.", "우리는 저녁 7시에 저녁식사를 한다.", "noun"),
    _word(9, "watch", "보다", "I watch TV in the evening.", "나는 저녁에 TV를 본다.", "verb"),
    _word(10, "sleep", "자다", "I go to sleep at 10 PM.", "나는 저녁 10시에 잔다.", "verb"),
    _word(11, "shower", "샤워", "I take a shower before bed.", "나는 자기 전에 샤워를 한다.", "noun"),
    _word(12, "friend", "친구", "I play with my friends.", "나는 친구들과 논다.", "noun"),
    _word(13, "usually", "보통", "I usually walk to school.", "나는 보통 학교에 걸어간다.", "adverb"),
    _word(14, "sometimes", "때때로", "I sometimes play soccer.", "나는 때때로 축구를 한다.", "adverb"),
    _word(15, "always", "항상", "I always do my best.", "나는 항상 최선을 다한다.", "adverb"),
    _word(16, "weekend", "주말", "I rest on the weekend.", "나는 주말에 쉰다.", "noun"),
    _word(17, "exercise", "운동하다", "I exercise every morning.", "나는 매일 아침 운동한다.", "verb"),
    _word(18, "read", "읽다", "I read books before bed.", "나는 자기 전에 책을 읽는다.", "verb"),
    _word(19, "help", "돕다", "I help my mom with cooking.", "나는 엄마의 요리를 돕는다.", "verb"),
    _word(20, "play", "놀다, 경기하다", "I play basketball after school.", "나는 방과 후에 농구를 한다.", "verb"),
]

MIDDLE_1_LESSON_1_PHRASES: List[Phrase] = [
    Phrase("m1-l1-p1", "get ready for", "~을 준비하다", "I get ready for school.", "나는 학교 갈 준비를 한다."),
    Phrase("m1-l1-p2", "go to bed", "잠자리에 들다", "I go to bed early.", "나는 일찍 잠자리에 든다."),
    Phrase("m1-l1-p3", "have breakfast/lunch/dinner", "아침/점심/저녁을 먹다",
           "We have breakfast together.", "우리는 함께 아침을 먹는다."),
    Phrase("m1-l1-p4", "after school", "방과 후에", "I play soccer after school.", "나는 방과 후에 축구를 한다."),
    Phrase("m1-l1-p5", "on weekends", "주말에", "I meet my friends on weekends.", "나는 주말에 친구들을 만난다."),
    Phrase("m1-l1-p6", "take a shower", "샤워하다", "I take a shower every morning.", "나는 매일 아침 샤워한다."),
    Phrase("m1-l1-p7", "do homework", "숙제하다", "I do homework in my room.", "나는 내 방에서 숙제한다."),
    Phrase("m1-l1-p8", "watch TV", "TV를 보다", "I watch TV after dinner.", "나는 저녁 식사 후에 TV를 본다."),
    Phrase("m1-l1-p9", "listen to music", "음악을 듣다",
           "I listen to music while studying.", "나는 공부하면서 음악을 듣는다."),
    Phrase("m1-l1-p10", "play with friends", "친구들과 놀다",
           "I play with friends in the park.", "나는 공원에서 친구들과 논다."),
]

MIDDLE_1_LESSON_1_GRAMMAR: List[GrammarSection] = [
    GrammarSection(
        id="m1-l1-g1",
        grammar_point="Present Simple Tense",
        korean_name="현재 시제 (단순현재)",
        explanation=(
            "습관적인 행동이나 일반적인 사실을 나타낼 때 사용합니다. "
            "주어가 3인칭 단수(he, she, it)일 때는 동사에 -s 또는 -es를 붙입니다."
        ),
        examples=[
            GrammarExample("I go to school every day.", "나는 매일 학교에 간다.", "go"),
            GrammarExample("She likes pizza.", "그녀는 피자를 좋아한다.", "likes"),
            GrammarExample("We study English on Mondays.", "우리는 월요일에 영어를 공부한다.", "study"),
        ],
    ),
    GrammarSection(
        id="m1-l1-g2",
        grammar_point="Frequency Adverbs",
        korean_name="빈도 부사",
        explanation=(
            "행동의 빈도를 나타내는 부사입니다. 일반동사 앞, be동사 뒤에 위치합니다. "
            "always(항상) > usually(보통) > often(자주) > sometimes(때때로) > never(절대~않다)"
        ),
        examples=[
            GrammarExample("I always wake up early.", "나는 항상 일찍 일어난다.", "always"),
            GrammarExample("She is usually happy.", "그녀는 보통 행복하다.", "usually"),
            GrammarExample("We sometimes play soccer.", "우리는 때때로 축구를 한다.", "sometimes"),
        ],
    ),
]

MIDDLE_1_LESSON_1_READING_PASSAGE = """My Daily Life

My name is Tom. I am 13 years old, and I am a middle school student. Let me tell you about my daily life.

Every morning, I wake up at 7 AM. First, I brush my teeth and wash my face. Then, I have breakfast with my family. We usually eat rice, soup, and side dishes together. After breakfast, I get ready for school.

I go to school by bus. School starts at 8:30 AM. I have six classes every day. My favorite subject is English because I like learning new words and talking with my friends in English. I also enjoy PE class because I love playing sports.

At 12:30 PM, we have lunch in the cafeteria. I usually eat with my best friend, Minji. After lunch, we sometimes play basketball in the playground.

School finishes at 3:30 PM. I go home and do my homework. I always do my homework before dinner. Then, I help my mom with cooking or cleaning.

We have dinner at 7 PM. After dinner, I watch TV or read books. Sometimes I play computer games, but my mom says I should not play too much. I usually go to bed at 10 PM.

On weekends, I exercise in the morning and meet my friends in the afternoon. I sometimes go to the movies with them. I enjoy my daily life!"""


def _placeholder_units(grade_id: str, count: int, start: int = 1) -> List[TextbookUnit]:
    """Units whose content is not ready yet."""
    return [
        TextbookUnit(
            id=f"{grade_id}-lesson-{n}",
            grade_id=grade_id,
            order=n,
            title=f"Lesson {n}. (준비중)",
            topic="준비중",
            is_mock=True,
        )
        for n in range(start, count + 1)
    ]


MIDDLE_1_UNITS: List[TextbookUnit] = [
    TextbookUnit(
        id="middle-1-lesson-1",
        grade_id="middle-1",
        order=1,
        title="Lesson 1. My Daily Life",
        topic="일상생활",
        words=MIDDLE_1_LESSON_1_WORDS,
        phrases=MIDDLE_1_LESSON_1_PHRASES,
        grammar=MIDDLE_1_LESSON_1_GRAMMAR,
        reading=ReadingSection(
            passage=MIDDLE_1_LESSON_1_READING_PASSAGE,
            title="My Daily Life",
            word_count=280,
            estimated_minutes=3,
        ),
    ),
] + _placeholder_units("middle-1", 10, start=2)

ALL_UNITS: Dict[str, List[TextbookUnit]] = {
    "middle-1": MIDDLE_1_UNITS,
    "middle-2": _placeholder_units("middle-2", 10),
    "middle-3": _placeholder_units("middle-3", 10),
    "high-1": _placeholder_units("high-1", 12),
    "high-2": _placeholder_units("high-2", 12),
    "high-3": _placeholder_units("high-3", 12),
}
