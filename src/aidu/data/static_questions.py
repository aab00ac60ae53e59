"""Static question banks used when generated questions are unavailable."""

GRAMMAR_QUESTIONS = [
    {
        "question": "다음 중 현재진행형으로 올바른 문장은?",
        "options": [
            "I am studying English now.",
            "I studying English now.",
            "I am study English now.",
            "I studies English now.",
        ],
        "correctAnswer": "I am studying English now.",
        "explanation": '현재진행형은 "be동사 + 동사ing" 형태입니다.',
    },
    {
        "question": '빈칸에 들어갈 알맞은 말은? "She ___ to school every day."',
        "options": ["go", "goes", "going", "is go"],
        "correctAnswer": "goes",
        "explanation": "3인칭 단수 현재형은 동사에 s/es를 붙입니다.",
    },
    {
        "question": '다음 문장의 시제는? "I have lived here for 5 years."',
        "options": ["현재시제", "과거시제", "현재완료", "미래시제"],
        "correctAnswer": "현재완료",
        "explanation": '"have + p.p" 형태는 현재완료입니다.',
    },
    {
        "question": '빈칸에 들어갈 알맞은 말은? "They ___ playing soccer now."',
        "options": ["is", "am", "are", "be"],
        "correctAnswer": "are",
        "explanation": "They는 복수이므로 are를 사용합니다.",
    },
    {
        "question": "과거형이 올바르지 않은 것은?",
        "options": ["go - went", "eat - ate", "run - ran", "study - studyed"],
        "correctAnswer": "study - studyed",
        "explanation": "study의 과거형은 studied입니다.",
    },
]

READING_QUESTIONS = [
    {
        "question": "지문의 주제로 가장 적절한 것은?",
        "options": ["일상생활", "여행 경험", "학교생활", "취미생활"],
        "correctAnswer": "일상생활",
        "explanation": "전반적으로 일상적인 활동들을 설명하고 있습니다.",
    },
    {
        "question": "글쓴이가 아침에 하는 일이 아닌 것은?",
        "options": ["양치질", "아침식사", "숙제하기", "학교 가기"],
        "correctAnswer": "숙제하기",
        "explanation": "숙제는 방과 후에 한다고 나와 있습니다.",
    },
    {
        "question": "글쓴이의 점심시간은?",
        "options": ["11:30", "12:00", "12:30", "13:00"],
        "correctAnswer": "12:30",
        "explanation": "We have lunch at 12:30.",
    },
]
