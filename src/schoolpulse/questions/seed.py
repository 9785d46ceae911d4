"""Question bank seed data: five questions per role.

Options are ordered best to worst; their values are the answer tokens the
score table understands.
"""

from __future__ import annotations

import logging
from typing import Any

from schoolpulse.storage.base import Storage

logger = logging.getLogger(__name__)



def _opt(value: str, label: str, description: str) -> dict[str, str]:
    return {"value": value, "label": label, "description": description}


QUESTION_SEED_DATA: list[dict[str, Any]] = [
    # Student
    {
        "role": "student",
        "category": "Student-Student Relationships",
        "text": "How often do you feel genuinely supported by your classmates during difficult times?",
        "options": [
            _opt("always", "Always", "My classmates consistently provide support"),
            _opt("usually", "Usually", "Most of the time I feel supported"),
            _opt("sometimes", "Sometimes", "Support varies depending on the situation"),
            _opt("rarely", "Rarely", "I rarely feel supported by peers"),
            _opt("never", "Never", "I don't feel supported by classmates"),
        ],
        "order": 1,
    },
    {
        "role": "student",
        "category": "Student-Student Relationships",
        "text": "How comfortable are you working in groups with different classmates?",
        "options": [
            _opt("very-comfortable", "Very comfortable", "I enjoy working with anyone"),
            _opt("somewhat-comfortable", "Somewhat comfortable", "I'm okay with most people"),
            _opt("neutral", "Neutral", "It depends on the people"),
            _opt("somewhat-uncomfortable", "Somewhat uncomfortable", "I prefer working with friends"),
            _opt("very-uncomfortable", "Very uncomfortable", "I avoid group work when possible"),
        ],
        "order": 2,
    },
    {
        "role": "student",
        "category": "Student-Staff Relationships",
        "text": "How comfortable do you feel approaching a teacher or staff member when you need help or support?",
        "options": [
            _opt("very-comfortable", "Very comfortable", "I feel completely at ease reaching out for help"),
            _opt("somewhat-comfortable", "Somewhat comfortable", "I feel okay about it, but sometimes hesitate"),
            _opt("neutral", "Neutral", "It depends on the situation and the person"),
            _opt("somewhat-uncomfortable", "Somewhat uncomfortable", "I prefer to handle things on my own when possible"),
            _opt("very-uncomfortable", "Very uncomfortable", "I avoid reaching out unless absolutely necessary"),
        ],
        "order": 3,
    },
    {
        "role": "student",
        "category": "Student-Staff Relationships",
        "text": "How well do you feel teachers understand your perspective and experiences?",
        "options": [
            _opt("very-well", "Very well", "Teachers really get where I'm coming from"),
            _opt("somewhat-well", "Somewhat well", "Some teachers understand me better than others"),
            _opt("neutral", "Neutral", "It's a mixed experience"),
            _opt("not-very-well", "Not very well", "Most teachers don't really understand me"),
            _opt("not-at-all", "Not at all", "I feel misunderstood by most staff"),
        ],
        "order": 4,
    },
    {
        "role": "student",
        "category": "School Community",
        "text": "How much do you feel like you belong and are valued at this school?",
        "options": [
            _opt("completely", "Completely", "This school feels like my second home"),
            _opt("mostly", "Mostly", "I feel like I belong most of the time"),
            _opt("somewhat", "Somewhat", "I feel like I belong in some areas but not others"),
            _opt("a-little", "A little", "I sometimes feel like I belong"),
            _opt("not-at-all", "Not at all", "I often feel like an outsider"),
        ],
        "order": 5,
    },
    # Staff
    {
        "role": "staff",
        "category": "Staff-Staff Relationships",
        "text": "How supported do you feel by your colleagues when facing challenges in your work?",
        "options": [
            _opt("very-supported", "Very supported", "My colleagues are always there to help"),
            _opt("somewhat-supported", "Somewhat supported", "I feel supported most of the time"),
            _opt("neutral", "Neutral", "Support varies depending on the situation"),
            _opt("somewhat-unsupported", "Somewhat unsupported", "I often feel like I'm on my own"),
            _opt("very-unsupported", "Very unsupported", "I rarely feel supported by colleagues"),
        ],
        "order": 1,
    },
    {
        "role": "staff",
        "category": "Staff-Staff Relationships",
        "text": "How often do you collaborate with colleagues from different departments?",
        "options": [
            _opt("regularly", "Regularly", "I work with other departments frequently"),
            _opt("sometimes", "Sometimes", "I collaborate across departments occasionally"),
            _opt("rarely", "Rarely", "Cross-department collaboration is uncommon"),
            _opt("never", "Never", "I work only within my department"),
            _opt("not-applicable", "Not applicable", "My role doesn't require cross-department work"),
        ],
        "order": 2,
    },
    {
        "role": "staff",
        "category": "Staff-Student Relationships",
        "text": "How comfortable do students seem when approaching you for help or guidance?",
        "options": [
            _opt("very-comfortable", "Very comfortable", "Students approach me easily and often"),
            _opt("somewhat-comfortable", "Somewhat comfortable", "Most students seem at ease with me"),
            _opt("neutral", "Neutral", "It varies by student"),
            _opt("somewhat-uncomfortable", "Somewhat uncomfortable", "Students seem hesitant to approach me"),
            _opt("very-uncomfortable", "Very uncomfortable", "Students rarely approach me for help"),
        ],
        "order": 3,
    },
    {
        "role": "staff",
        "category": "Staff-Administration Relationships",
        "text": "How well do you feel administration understands the day-to-day challenges you face?",
        "options": [
            _opt("very-well", "Very well", "Administration is very aware of my challenges"),
            _opt("somewhat-well", "Somewhat well", "They understand most of my challenges"),
            _opt("neutral", "Neutral", "Understanding varies by administrator"),
            _opt("not-very-well", "Not very well", "They don't fully grasp my daily challenges"),
            _opt("not-at-all", "Not at all", "There's a significant disconnect"),
        ],
        "order": 4,
    },
    {
        "role": "staff",
        "category": "School Community",
        "text": "How much do you feel your voice and input are valued in school decisions?",
        "options": [
            _opt("very-valued", "Very valued", "My input is consistently sought and considered"),
            _opt("somewhat-valued", "Somewhat valued", "My voice matters in most situations"),
            _opt("neutral", "Neutral", "It depends on the decision"),
            _opt("somewhat-undervalued", "Somewhat undervalued", "My input is rarely considered"),
            _opt("very-undervalued", "Very undervalued", "I feel my voice doesn't matter"),
        ],
        "order": 5,
    },
    # Administrator
    {
        "role": "administrator",
        "category": "Administration-Staff Relationships",
        "text": "How effectively do you feel you communicate with your teaching and support staff?",
        "options": [
            _opt("very-effectively", "Very effectively", "Communication flows smoothly in both directions"),
            _opt("somewhat-effectively", "Somewhat effectively", "Most communication is effective"),
            _opt("neutral", "Neutral", "Communication effectiveness varies"),
            _opt("somewhat-ineffectively", "Somewhat ineffectively", "Communication often breaks down"),
            _opt("very-ineffectively", "Very ineffectively", "Communication is a significant challenge"),
        ],
        "order": 1,
    },
    {
        "role": "administrator",
        "category": "Administration-Student Relationships",
        "text": "How approachable do you feel you are to students in your school?",
        "options": [
            _opt("very-approachable", "Very approachable", "Students regularly come to me with concerns"),
            _opt("somewhat-approachable", "Somewhat approachable", "Some students feel comfortable approaching me"),
            _opt("neutral", "Neutral", "It depends on the student and situation"),
            _opt("somewhat-unapproachable", "Somewhat unapproachable", "Students rarely approach me directly"),
            _opt("very-unapproachable", "Very unapproachable", "Students seem intimidated by my position"),
        ],
        "order": 2,
    },
    {
        "role": "administrator",
        "category": "Administration-Community Relationships",
        "text": "How well do you feel connected to the day-to-day experiences of your school community?",
        "options": [
            _opt("very-connected", "Very connected", "I'm actively involved in daily school life"),
            _opt("somewhat-connected", "Somewhat connected", "I stay informed about most happenings"),
            _opt("neutral", "Neutral", "My connection varies by area"),
            _opt("somewhat-disconnected", "Somewhat disconnected", "I'm often removed from daily activities"),
            _opt("very-disconnected", "Very disconnected", "I feel isolated from the school community"),
        ],
        "order": 3,
    },
    {
        "role": "administrator",
        "category": "Leadership and Decision Making",
        "text": "How well do you feel school decisions reflect the input of all community members?",
        "options": [
            _opt("very-well", "Very well", "All voices are heard and considered"),
            _opt("somewhat-well", "Somewhat well", "Most perspectives are included"),
            _opt("neutral", "Neutral", "Input varies by decision type"),
            _opt("not-very-well", "Not very well", "Some voices are often overlooked"),
            _opt("not-at-all", "Not at all", "Decisions are made without broad input"),
        ],
        "order": 4,
    },
    {
        "role": "administrator",
        "category": "School Culture",
        "text": "How successful do you feel in creating an inclusive and welcoming school environment?",
        "options": [
            _opt("very-successful", "Very successful", "Our school is truly inclusive for all"),
            _opt("somewhat-successful", "Somewhat successful", "We're making good progress on inclusion"),
            _opt("neutral", "Neutral", "Inclusion efforts are mixed"),
            _opt("somewhat-unsuccessful", "Somewhat unsuccessful", "We have significant inclusion challenges"),
            _opt("very-unsuccessful", "Very unsuccessful", "Inclusion is a major concern"),
        ],
        "order": 5,
    },
    # Counselor
    {
        "role": "counselor",
        "category": "Counselor-Student Relationships",
        "text": "How comfortable do students seem when seeking support from you?",
        "options": [
            _opt("very-comfortable", "Very comfortable", "Students regularly and openly seek my help"),
            _opt("somewhat-comfortable", "Somewhat comfortable", "Most students seem at ease with me"),
            _opt("neutral", "Neutral", "Comfort levels vary significantly by student"),
            _opt("somewhat-uncomfortable", "Somewhat uncomfortable", "Many students seem hesitant"),
            _opt("very-uncomfortable", "Very uncomfortable", "Students rarely seek my support"),
        ],
        "order": 1,
    },
    {
        "role": "counselor",
        "category": "Counselor-Staff Relationships",
        "text": "How well do you feel teaching staff utilize your expertise and resources?",
        "options": [
            _opt("very-well", "Very well", "Staff regularly collaborate with me"),
            _opt("somewhat-well", "Somewhat well", "Most staff work well with me"),
            _opt("neutral", "Neutral", "Collaboration varies by teacher"),
            _opt("not-very-well", "Not very well", "Staff rarely engage with my services"),
            _opt("not-at-all", "Not at all", "There's little collaboration with staff"),
        ],
        "order": 2,
    },
    {
        "role": "counselor",
        "category": "Mental Health and Wellbeing",
        "text": "How effectively can you address the mental health and emotional needs in your school?",
        "options": [
            _opt("very-effectively", "Very effectively", "I can meet most needs with available resources"),
            _opt("somewhat-effectively", "Somewhat effectively", "I address many needs but face some limitations"),
            _opt("neutral", "Neutral", "Effectiveness varies by situation"),
            _opt("somewhat-ineffectively", "Somewhat ineffectively", "Resource constraints limit my effectiveness"),
            _opt("very-ineffectively", "Very ineffectively", "I cannot adequately address community needs"),
        ],
        "order": 3,
    },
    {
        "role": "counselor",
        "category": "Crisis Prevention and Response",
        "text": "How well does your school community work together in identifying and supporting students in crisis?",
        "options": [
            _opt("very-well", "Very well", "Strong collaboration in crisis identification and response"),
            _opt("somewhat-well", "Somewhat well", "Good collaboration with room for improvement"),
            _opt("neutral", "Neutral", "Collaboration is inconsistent"),
            _opt("not-very-well", "Not very well", "Limited collaboration in crisis situations"),
            _opt("not-at-all", "Not at all", "Poor communication and collaboration"),
        ],
        "order": 4,
    },
    {
        "role": "counselor",
        "category": "Preventive Programming",
        "text": "How supported do you feel in implementing preventive mental health and relationship-building programs?",
        "options": [
            _opt("very-supported", "Very supported", "Strong administrative and community support"),
            _opt("somewhat-supported", "Somewhat supported", "Good support with some barriers"),
            _opt("neutral", "Neutral", "Support varies by program type"),
            _opt("somewhat-unsupported", "Somewhat unsupported", "Limited support for preventive programs"),
            _opt("very-unsupported", "Very unsupported", "Little to no support for prevention efforts"),
        ],
        "order": 5,
    },
]


async def seed_questions(storage: Storage) -> None:
    """Seed the question bank (idempotent)."""
    inserted = await storage.seed_questions(QUESTION_SEED_DATA)
    if inserted:
        logger.info("Seeded %d questions", inserted)
