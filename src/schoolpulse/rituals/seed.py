"""Micro-ritual catalogue: six group and six individual activities."""

from __future__ import annotations

import logging
from typing import Any

from schoolpulse.storage.base import Storage

logger = logging.getLogger(__name__)

ALL_ROLES = ["student", "staff", "administrator", "counselor"]

MICRO_RITUAL_SEED_DATA: list[dict[str, Any]] = [
    # Group activities
    {
        "title": "Morning Greeting Circle",
        "description": "Start each day with a brief circle where everyone shares one word about how they're feeling",
        "category": "Student-Staff Connection",
        "target_relationship": "Student-Teacher",
        "time_required": "5-10 minutes",
        "participant_count": "Whole class",
        "difficulty": "Easy",
        "steps": [
            "Form a circle with all participants",
            "Teacher models by sharing one feeling word",
            "Go around the circle, each person shares one word",
            "No discussion needed - just listening and acknowledgment",
            "Close with a collective deep breath",
        ],
        "expected_outcome": "Creates a sense of community and helps teachers understand student emotional states",
        "applicable_roles": ["student", "staff"],
    },
    {
        "title": "Weekly Peer Appreciation Notes",
        "description": "Students write anonymous appreciation notes to classmates, fostering positive peer relationships",
        "category": "Student-Student Connection",
        "target_relationship": "Peer-to-Peer",
        "time_required": "15 minutes",
        "participant_count": "Class or small group",
        "difficulty": "Easy",
        "steps": [
            "Provide small cards or sticky notes to each student",
            "Students write genuine appreciation for a classmate's action or quality",
            "Notes should be specific and positive",
            "Collect and redistribute anonymously",
            "Allow time for students to read their notes",
        ],
        "expected_outcome": "Builds empathy, recognition, and positive peer connections",
        "applicable_roles": ["student"],
    },
    {
        "title": "Cross-Department Lunch Rotation",
        "description": "Monthly lunch meetings between staff from different departments to build interdisciplinary connections",
        "category": "Staff-Staff Connection",
        "target_relationship": "Cross-Department",
        "time_required": "30-45 minutes",
        "participant_count": "4-6 staff members",
        "difficulty": "Medium",
        "steps": [
            "Create rotating groups mixing departments (math with art, PE with science, etc.)",
            "Schedule monthly lunch meetings",
            "Provide conversation starters about teaching practices",
            "Share one successful strategy from each department",
            "Discuss how departments can support each other",
        ],
        "expected_outcome": "Breaks down silos and creates collaborative opportunities across departments",
        "applicable_roles": ["staff"],
    },
    {
        "title": "Administrative Coffee Connections",
        "description": "Administrators hold informal coffee meetings with small groups of staff and students",
        "category": "Administration-Community",
        "target_relationship": "Administrator-Staff/Student",
        "time_required": "20-30 minutes",
        "participant_count": "4-8 people",
        "difficulty": "Medium",
        "steps": [
            "Schedule weekly informal coffee sessions",
            "Invite mixed groups of staff and students",
            "Create comfortable, non-evaluative atmosphere",
            "Share updates and listen to concerns",
            "Follow up on actionable items discussed",
        ],
        "expected_outcome": "Increases administrator visibility and builds trust with school community",
        "applicable_roles": ["administrator"],
    },
    {
        "title": "Gratitude Wall Collaboration",
        "description": "Create a shared space where community members can express appreciation for each other",
        "category": "School-Wide Connection",
        "target_relationship": "All Community",
        "time_required": "Ongoing",
        "participant_count": "Individual or group",
        "difficulty": "Easy",
        "steps": [
            "Designate a visible wall or bulletin board space",
            "Provide colorful sticky notes and markers",
            "Encourage specific, genuine appreciation notes",
            "Rotate content weekly to keep it fresh",
            "Celebrate particularly meaningful contributions",
        ],
        "expected_outcome": "Creates visible culture of appreciation and positive recognition",
        "applicable_roles": ALL_ROLES,
    },
    {
        "title": "Counselor Check-in Circles",
        "description": "Small group check-ins led by counselors to strengthen support networks",
        "category": "Mental Health Support",
        "target_relationship": "Counselor-Student",
        "time_required": "25-30 minutes",
        "participant_count": "6-10 students",
        "difficulty": "Medium",
        "steps": [
            "Form small, consistent groups that meet weekly",
            "Begin with a brief mindfulness or grounding exercise",
            "Use talking circles where each person shares briefly",
            "Focus on building listening skills and empathy",
            "End with a group affirmation or positive intention",
        ],
        "expected_outcome": "Strengthens peer support networks and emotional intelligence",
        "applicable_roles": ["counselor"],
    },
    # Individual activities
    {
        "title": "Personal Connection Journal",
        "description": "Keep a daily journal reflecting on positive interactions and relationships at school",
        "category": "Self-Reflection",
        "target_relationship": "Self-Awareness",
        "time_required": "5-10 minutes daily",
        "participant_count": "Individual",
        "difficulty": "Easy",
        "steps": [
            "Set aside 5-10 minutes each day for reflection",
            "Write about one positive interaction you had that day",
            "Note what made the interaction meaningful",
            "Identify one person you'd like to connect with better",
            "Plan a simple way to reach out to that person tomorrow",
        ],
        "expected_outcome": "Increases awareness of relationships and intentional connection-building",
        "applicable_roles": ALL_ROLES,
    },
    {
        "title": "Secret Acts of Kindness",
        "description": "Perform small, anonymous acts of kindness to build positive school culture",
        "category": "Individual Kindness",
        "target_relationship": "Community Building",
        "time_required": "5-15 minutes",
        "participant_count": "Individual",
        "difficulty": "Easy",
        "steps": [
            "Choose one small act of kindness to do anonymously each day",
            "Examples: leave encouraging notes, help clean up, bring supplies",
            "Focus on actions that help others feel seen and valued",
            "Keep acts simple and genuine",
            "Reflect on how these actions affect the school atmosphere",
        ],
        "expected_outcome": "Creates ripple effects of positivity and models caring behavior",
        "applicable_roles": ALL_ROLES,
    },
    {
        "title": "Daily Hello Challenge",
        "description": "Make a point to greet three new people each day with genuine warmth",
        "category": "Individual Outreach",
        "target_relationship": "Community Connection",
        "time_required": "Throughout the day",
        "participant_count": "Individual",
        "difficulty": "Medium",
        "steps": [
            "Set a goal to greet three people you don't usually talk to each day",
            "Use their name if you know it, or introduce yourself if you don't",
            "Make eye contact and offer a genuine smile",
            "Ask a simple question like 'How's your day going?'",
            "Listen actively to their response",
        ],
        "expected_outcome": "Breaks down social barriers and creates new connections across the school",
        "applicable_roles": ALL_ROLES,
    },
    {
        "title": "Mindful Presence Practice",
        "description": "Practice being fully present during interactions to deepen connections",
        "category": "Mindfulness",
        "target_relationship": "Quality Connections",
        "time_required": "Throughout the day",
        "participant_count": "Individual",
        "difficulty": "Medium",
        "steps": [
            "Choose three conversations each day to practice full presence",
            "Put away devices and eliminate distractions",
            "Make eye contact and listen without planning your response",
            "Notice body language and emotional cues",
            "Respond with empathy and genuine interest",
        ],
        "expected_outcome": "Improves quality of relationships through deeper, more meaningful interactions",
        "applicable_roles": ALL_ROLES,
    },
    {
        "title": "Strengths Spotter",
        "description": "Actively notice and acknowledge others' strengths and positive qualities",
        "category": "Recognition",
        "target_relationship": "Appreciation",
        "time_required": "Throughout the day",
        "participant_count": "Individual",
        "difficulty": "Easy",
        "steps": [
            "Set an intention to notice one strength in three different people each day",
            "Look for qualities like kindness, effort, creativity, or helpfulness",
            "Find appropriate moments to acknowledge what you noticed",
            "Be specific in your recognition ('I noticed how patient you were with...')",
            "Keep a mental note of the positive impact of your recognition",
        ],
        "expected_outcome": "Builds others' confidence while strengthening your appreciation skills",
        "applicable_roles": ALL_ROLES,
    },
    {
        "title": "Lunch Buddy Invitation",
        "description": "Proactively invite someone to join you for lunch who might be sitting alone",
        "category": "Inclusion",
        "target_relationship": "Peer Support",
        "time_required": "Lunch period",
        "participant_count": "Individual initiative",
        "difficulty": "Medium",
        "steps": [
            "Scan the lunch area for someone eating alone",
            "Approach with a friendly smile and introduce yourself if needed",
            "Ask if they'd like to join you or if you can join them",
            "Start with simple conversation starters about shared experiences",
            "Make it a regular practice to include others",
        ],
        "expected_outcome": "Reduces isolation and creates opportunities for new friendships",
        "applicable_roles": ["student", "staff"],
    },
]


async def seed_micro_rituals(storage: Storage) -> None:
    """Seed the micro-ritual catalogue (idempotent)."""
    inserted = await storage.seed_micro_rituals(MICRO_RITUAL_SEED_DATA)
    if inserted:
        logger.info("Seeded %d micro-rituals", inserted)
