"""
Built-in bucket templates offered when creating a bucket.
Edit freely; `id` is what the API uses to pick one.
"""
from typing import TypedDict


class TemplateActivity(TypedDict):
    text: str
    description: str


class BucketTemplate(TypedDict):
    id: str
    name: str
    tagline: str
    activities: list[TemplateActivity]


BUCKET_TEMPLATES: list[BucketTemplate] = [
    {
        "id": "morning-routine",
        "name": "Morning Routine",
        "tagline": "Start your day with energy and purpose",
        "activities": [
            {"text": "Drink a glass of water", "description": "Hydrate your body after a night's rest"},
            {"text": "Do 10 minutes of stretching", "description": "Wake up your muscles and improve flexibility"},
            {"text": "Write in your journal", "description": "Reflect on your thoughts and set intentions"},
            {"text": "Plan your day", "description": "Organize your tasks and priorities"},
            {"text": "Take a quick walk outside", "description": "Get fresh air and natural light"},
        ],
    },
    {
        "id": "fitness",
        "name": "Fitness & Health",
        "tagline": "Stay active and healthy",
        "activities": [
            {"text": "Do a 20-minute workout", "description": "Get your heart pumping with a quick exercise session"},
            {"text": "Go for a run", "description": "Enjoy the outdoors while improving cardiovascular health"},
            {"text": "Practice yoga", "description": "Find balance and flexibility through mindful movement"},
            {"text": "Take the stairs", "description": "Incorporate movement into your daily routine"},
            {"text": "Do some push-ups", "description": "Build upper body strength with this classic exercise"},
        ],
    },
    {
        "id": "learning",
        "name": "Learning & Growth",
        "tagline": "Expand your knowledge and skills",
        "activities": [
            {"text": "Read a chapter of a book", "description": "Expand your knowledge through reading"},
            {"text": "Watch an educational video", "description": "Learn something new through visual content"},
            {"text": "Practice a new language", "description": "Improve your language skills with daily practice"},
            {"text": "Learn a new skill online", "description": "Take advantage of online learning resources"},
            {"text": "Write down what you learned", "description": "Reinforce learning through note-taking"},
        ],
    },
    {
        "id": "creativity",
        "name": "Creative Expression",
        "tagline": "Unleash your creative potential",
        "activities": [
            {"text": "Draw or sketch something", "description": "Express yourself through visual art"},
            {"text": "Write a short story", "description": "Let your imagination flow through words"},
            {"text": "Play a musical instrument", "description": "Create melodies and rhythms"},
            {"text": "Take creative photos", "description": "Capture moments from a new perspective"},
            {"text": "Try a new art technique", "description": "Experiment with different creative methods"},
        ],
    },
    {
        "id": "mindfulness",
        "name": "Mindfulness & Wellness",
        "tagline": "Find peace and balance",
        "activities": [
            {"text": "Practice meditation", "description": "Find inner peace and clarity"},
            {"text": "Do breathing exercises", "description": "Calm your mind and reduce stress"},
            {"text": "Take a mindful walk", "description": "Connect with nature and your surroundings"},
            {"text": "Practice gratitude", "description": "Reflect on the positive aspects of your life"},
            {"text": "Listen to calming music", "description": "Soothe your mind with peaceful sounds"},
        ],
    },
    {
        "id": "entertainment",
        "name": "Fun & Entertainment",
        "tagline": "Relax and have a good time",
        "activities": [
            {"text": "Listen to your favorite music", "description": "Enjoy your favorite songs and discover new ones"},
            {"text": "Watch a funny video", "description": "Laugh and boost your mood"},
            {"text": "Play a board game", "description": "Have fun with friends or family"},
            {"text": "Call a friend", "description": "Connect with someone you care about"},
            {"text": "Try a new hobby", "description": "Explore a new interest or skill"},
        ],
    },
]


def get_template(template_id: str) -> BucketTemplate | None:
    for t in BUCKET_TEMPLATES:
        if t["id"] == template_id:
            return t
    return None
