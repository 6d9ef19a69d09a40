"""Seed Templates — static source material for the demo data generator."""

from talentflow.core.domain_types import JobType, QuestionType

JOB_TEMPLATES = [
    {
        "title": "Senior Frontend Developer",
        "description": "We're looking for an experienced frontend developer to join our growing team. You'll work with React, TypeScript, and modern web technologies to build amazing user experiences.",
        "requirements": ["5+ years React experience", "TypeScript proficiency", "Experience with state management", "Strong CSS skills"],
        "benefits": ["Competitive salary", "Health insurance", "Remote work", "Professional development"],
        "tags": ["Frontend", "React", "TypeScript", "Remote"],
        "location": "Remote",
        "salary": "$90,000 - $120,000",
        "department": "Engineering",
    },
    {
        "title": "Backend Engineer",
        "description": "Join our backend team to build scalable APIs and microservices. Work with Node.js, Python, and cloud technologies.",
        "requirements": ["3+ years backend experience", "Node.js or Python", "Database design", "API development"],
        "benefits": ["Competitive salary", "Health insurance", "Stock options", "Flexible hours"],
        "tags": ["Backend", "Node.js", "Python", "APIs"],
        "location": "San Francisco, CA",
        "salary": "$100,000 - $140,000",
        "department": "Engineering",
    },
    {
        "title": "Product Manager",
        "description": "Lead product strategy and work with cross-functional teams to deliver exceptional user experiences.",
        "requirements": ["3+ years PM experience", "Analytical thinking", "User research", "Agile methodology"],
        "benefits": ["Competitive salary", "Health insurance", "Stock options", "Unlimited PTO"],
        "tags": ["Product", "Strategy", "Leadership", "Analytics"],
        "location": "New York, NY",
        "salary": "$110,000 - $150,000",
        "department": "Product",
    },
    {
        "title": "UX Designer",
        "description": "Create intuitive and beautiful user experiences. Work closely with product and engineering teams.",
        "requirements": ["3+ years UX experience", "Figma proficiency", "User research", "Prototyping"],
        "benefits": ["Competitive salary", "Health insurance", "Design budget", "Conference attendance"],
        "tags": ["UX", "Design", "Figma", "Research"],
        "location": "Austin, TX",
        "salary": "$80,000 - $110,000",
        "department": "Design",
    },
    {
        "title": "DevOps Engineer",
        "description": "Build and maintain our cloud infrastructure. Work with AWS, Docker, and CI/CD pipelines.",
        "requirements": ["3+ years DevOps experience", "AWS expertise", "Docker/Kubernetes", "CI/CD"],
        "benefits": ["Competitive salary", "Health insurance", "Stock options", "Certification support"],
        "tags": ["DevOps", "AWS", "Docker", "Infrastructure"],
        "location": "Seattle, WA",
        "salary": "$95,000 - $130,000",
        "department": "Engineering",
    },
    {
        "title": "Data Scientist",
        "description": "Extract insights from data to drive business decisions. Work with machine learning and statistical analysis.",
        "requirements": ["2+ years data science experience", "Python/R proficiency", "Machine learning", "Statistics"],
        "benefits": ["Competitive salary", "Health insurance", "Stock options", "Research time"],
        "tags": ["Data Science", "Machine Learning", "Python", "Analytics"],
        "location": "Boston, MA",
        "salary": "$85,000 - $120,000",
        "department": "Data",
    },
    {
        "title": "Marketing Manager",
        "description": "Lead marketing campaigns and grow our user base. Work with digital marketing and content creation.",
        "requirements": ["3+ years marketing experience", "Digital marketing", "Content creation", "Analytics"],
        "benefits": ["Competitive salary", "Health insurance", "Marketing budget", "Creative freedom"],
        "tags": ["Marketing", "Digital", "Content", "Growth"],
        "location": "Los Angeles, CA",
        "salary": "$70,000 - $95,000",
        "department": "Marketing",
    },
    {
        "title": "Sales Representative",
        "description": "Drive revenue growth by building relationships with enterprise clients.",
        "requirements": ["2+ years sales experience", "B2B sales", "CRM proficiency", "Communication skills"],
        "benefits": ["Competitive base + commission", "Health insurance", "Car allowance", "Unlimited earning potential"],
        "tags": ["Sales", "B2B", "Enterprise", "Relationship Building"],
        "location": "Chicago, IL",
        "salary": "$50,000 + Commission",
        "department": "Sales",
    },
    {
        "title": "QA Engineer",
        "description": "Ensure product quality through comprehensive testing. Work with automated testing frameworks.",
        "requirements": ["2+ years QA experience", "Test automation", "Selenium/Cypress", "Bug tracking"],
        "benefits": ["Competitive salary", "Health insurance", "Learning budget", "Flexible schedule"],
        "tags": ["QA", "Testing", "Automation", "Quality"],
        "location": "Denver, CO",
        "salary": "$65,000 - $90,000",
        "department": "Engineering",
    },
    {
        "title": "Customer Success Manager",
        "description": "Help customers achieve their goals with our product. Drive customer satisfaction and retention.",
        "requirements": ["2+ years customer success experience", "Communication skills", "Problem solving", "CRM usage"],
        "benefits": ["Competitive salary", "Health insurance", "Customer visits", "Growth opportunities"],
        "tags": ["Customer Success", "Retention", "Support", "Relationship Management"],
        "location": "Miami, FL",
        "salary": "$60,000 - $80,000",
        "department": "Customer Success",
    },
]

SEED_JOB_TYPES = (JobType.FULL_TIME, JobType.PART_TIME, JobType.CONTRACT)

FIRST_NAMES = [
    "Siddharth", "Layla", "Aditya", "Léa", "Mohammed", "Lena", "Quinn",
    "Drew", "Lillian", "Svetlana", "Jose", "Sophia", "Haruto", "Avery",
    "Jordan", "Vihaan", "Cameron", "Ananya", "Chloe", "Manon", "Arjun",
    "Jing", "Louis", "Charlotte", "Kendall", "Nora", "Stella", "Wei",
    "Santiago", "Aarav", "Fatima", "Penelope", "Taylor", "Riya", "Finley",
    "Riley", "Kabir", "Aisha", "Madison", "Lukas", "Sakura", "Alex",
    "Amelia", "Grace", "Mei", "Olivia", "Yuki", "Hazel", "Zoe", "Kenji",
    "Leon", "Natalie", "Isabella", "Thiago", "Luna", "Kavya", "Ivan",
    "Evelyn", "Zion", "Harper", "Morgan", "Ellie", "Emery", "River",
    "Reese", "Lily", "Ella", "Audrey", "Scarlett", "Hayden", "Brooklyn",
    "Parker", "Priya", "Mila", "Skyler", "Leah", "Sam", "Rowan",
    "Elizabeth", "Hannah", "Diya", "Rohan", "Jamie", "Phoenix", "Sage",
    "Mateo", "Winter", "Violet", "Dakota", "Sawyer", "Camila", "Blake",
    "True", "Victoria", "Hanna", "Gabriel", "Abigail", "Tatum", "Addison",
    "Saanvi", "Bella", "Zara", "Zoey", "Casey", "Emily", "Maria", "Dmitri",
    "Eleanor", "Sofia", "Omar", "Li", "Emma", "Ava", "Aurora", "Savannah",
    "Valentina", "Ishaan", "Anastasia", "Mia", "Aria", "Aubrey",
]

LAST_NAMES = [
    "Smith", "Johnson", "Williams", "Brown", "Jones", "Garcia", "Miller", "Davis",
    "Rodriguez", "Martinez", "Hernandez", "Lopez", "Gonzalez", "Wilson", "Anderson", "Thomas",
    "Taylor", "Moore", "Jackson", "Martin", "Lee", "Perez", "Thompson", "White",
    "Harris", "Sanchez", "Clark", "Ramirez", "Lewis", "Robinson", "Walker", "Young",
    "Allen", "King", "Wright", "Scott", "Torres", "Nguyen", "Hill", "Flores",
    "Green", "Adams", "Nelson", "Baker", "Hall", "Rivera", "Campbell", "Mitchell",
    "Carter", "Roberts", "Gomez", "Phillips", "Evans", "Turner", "Diaz", "Parker",
    "Cruz", "Edwards", "Collins", "Reyes", "Stewart", "Morris", "Morales", "Murphy",
    "Cook", "Rogers", "Gutierrez", "Ortiz", "Morgan", "Cooper", "Peterson", "Bailey",
    "Reed", "Kelly", "Howard", "Ramos", "Kim", "Cox", "Ward", "Richardson",
    "Watson", "Brooks", "Chavez", "Wood", "James", "Bennett", "Gray", "Mendoza",
    "Singh", "Kumar", "Patel", "Sharma", "Khan", "Gupta", "Verma", "Das",
    "Roy", "Reddy", "Rao", "Jain", "Mishra", "Mehta", "Shah", "Nair",
    "Iyer", "Jha", "Chopra", "Yadav", "Aggarwal", "Menon", "Joshi",
]

EMAIL_DOMAINS = ["gmail.com", "yahoo.com", "hotmail.com", "outlook.com", "company.com"]

COVER_LETTER = (
    "Dear Hiring Manager,\n\n"
    "I am writing to express my interest in the {job_title} position. "
    "I believe my skills and experience make me a strong candidate for this role.\n\n"
    "Best regards,\n{name}"
)


# ─── Assessment sections ─────────────────────────────────────────

# Jobs carrying any of these tags get the Technical Skills section
ENGINEERING_TAGS = frozenset({"Frontend", "Backend", "React"})

TECHNICAL_SKILLS_SECTION = {
    "title": "Technical Skills",
    "description": "Evaluate the candidate's technical knowledge",
    "questions": [
        {
            "type": QuestionType.SINGLE_CHOICE.value,
            "title": "How many years of experience do you have with React?",
            "required": True,
            "options": ["Less than 1 year", "1-2 years", "3-5 years", "5+ years"],
        },
        {
            "type": QuestionType.MULTI_CHOICE.value,
            "title": "Which technologies are you familiar with?",
            "required": True,
            "options": ["JavaScript", "TypeScript", "Node.js", "Python", "AWS", "Docker"],
        },
        {
            "type": QuestionType.LONG_TEXT.value,
            "title": "Describe a challenging project you worked on and how you solved it.",
            "required": True,
            "validation": {"min_length": 100, "max_length": 1000},
        },
        {
            "type": QuestionType.SHORT_TEXT.value,
            "title": "What is your preferred development environment?",
            "required": False,
            "validation": {"max_length": 200},
        },
        {
            "type": QuestionType.NUMERIC.value,
            "title": "Rate your confidence with version control (Git) on a scale of 1-10",
            "required": True,
            "validation": {"min_value": 1, "max_value": 10},
        },
    ],
}

PROBLEM_SOLVING_SECTION = {
    "title": "Problem Solving",
    "description": "Assess critical thinking and problem-solving abilities",
    "questions": [
        {
            "type": QuestionType.SHORT_TEXT.value,
            "title": "How would you debug a performance issue in a web application?",
            "required": True,
            "validation": {"max_length": 500},
        },
        {
            "type": QuestionType.NUMERIC.value,
            "title": "Rate your problem-solving skills on a scale of 1-10",
            "required": True,
            "validation": {"min_value": 1, "max_value": 10},
        },
        {
            "type": QuestionType.SINGLE_CHOICE.value,
            "title": "When facing a difficult problem, your first approach is:",
            "required": True,
            "options": [
                "Break it down into smaller parts",
                "Ask for help from colleagues",
                "Research similar problems online",
                "Try different solutions until one works",
            ],
        },
        {
            "type": QuestionType.LONG_TEXT.value,
            "title": "Describe a time when you had to learn a new technology quickly for a project.",
            "required": True,
            "validation": {"min_length": 50, "max_length": 600},
        },
        {
            "type": QuestionType.SINGLE_CHOICE.value,
            "title": "How do you prioritize tasks when multiple deadlines are approaching?",
            "required": True,
            "options": [
                "Focus on the most urgent task first",
                "Work on multiple tasks simultaneously",
                "Delegate when possible",
                "Reassess deadlines with stakeholders",
            ],
        },
    ],
}

CULTURAL_FIT_SECTION = {
    "title": "Cultural Fit",
    "description": "Understand the candidate's work style and values",
    "questions": [
        {
            "type": QuestionType.SINGLE_CHOICE.value,
            "title": "What motivates you most in your work?",
            "required": True,
            "options": [
                "Learning new technologies",
                "Solving complex problems",
                "Working with a great team",
                "Making a positive impact",
            ],
        },
        {
            "type": QuestionType.LONG_TEXT.value,
            "title": "Describe your ideal work environment and team culture.",
            "required": False,
            "validation": {"max_length": 800},
        },
        {
            "type": QuestionType.SHORT_TEXT.value,
            "title": "What are your career goals for the next 2 years?",
            "required": True,
            "validation": {"max_length": 300},
        },
        {
            "type": QuestionType.SINGLE_CHOICE.value,
            "title": "How do you prefer to receive feedback?",
            "required": True,
            "options": ["In-person meetings", "Written feedback", "Regular check-ins", "Peer reviews"],
        },
        {
            "type": QuestionType.MULTI_CHOICE.value,
            "title": "Which work arrangements appeal to you?",
            "required": True,
            "options": [
                "Remote work", "Hybrid schedule", "Office-based",
                "Flexible hours", "Four-day work week",
            ],
        },
    ],
}

ASSESSMENT_SETTINGS = {
    "time_limit": 60,
    "allow_multiple_attempts": False,
    "show_results": True,
}
