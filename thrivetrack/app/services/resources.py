# ruff: noqa: E501, RUF001
from __future__ import annotations

from functools import lru_cache

from ..schemas.resources import ResourceItem, ResourceSection, ResourcesResponse

QUICK_SUPPORT: list[dict[str, str]] = [
    {
        "title": "Samaritans Crisis Helpline",
        "desc": "24/7 confidential support",
        "type": "phone",
        "phone": "116123",
    },
    {
        "title": "Text About It (50808)",
        "desc": "Free, anonymous, 24/7 messaging service",
        "type": "link",
        "url": "https://www.textaboutit.ie/",
    },
    {
        "title": "Emergency Services",
        "desc": "Immediate emergency help",
        "type": "phone",
        "phone": "999",
    },
]

RESOURCE_SECTIONS: list[dict[str, object]] = [
    {
        "heading": "Mental Health Support",
        "items": [
            {
                "title": "Find Your College Student Counselling Service",
                "desc": "Search for your university or college's official counselling page.",
                "type": "link",
                "url": "https://www.google.com/search?q=college+student+counselling+service+ireland",
            },
            {
                "title": "Therapy & Professional Support",
                "desc": "Information on therapy types and professional support options.",
                "type": "link",
                "url": "https://fettle.ie/types-of-therapy/",
            },
            {
                "title": "CBT & Coping Tools",
                "desc": "Self-help techniques you can try.",
                "type": "link",
                "url": "https://www.nhs.uk/every-mind-matters/mental-wellbeing-tips/self-help-cbt-techniques/",
            },
        ],
    },
    {
        "heading": "Academic & Student Support",
        "items": [
            {
                "title": "Exam Stress Support",
                "desc": "Managing pressure and anxiety around exams.",
                "type": "link",
                "url": "https://www2.hse.ie/mental-health/life-situations-events/exam-stress/",
            },
            {
                "title": "Study Skills & Overwhelm",
                "desc": "Tips for managing your workload.",
                "type": "link",
                "url": "https://libguides.ucd.ie/StudySkills/time",
            },
            {
                "title": "Time Management Help",
                "desc": "Balance academics and wellbeing.",
                "type": "link",
                "url": "https://www.universityofgalway.ie/counsellors/resources/self-help/time-management/",
            },
        ],
    },
    {
        "heading": "Self-Care & Wellbeing",
        "items": [
            {
                "title": "Sleep & Rest Tips",
                "desc": "Improve your sleep quality.",
                "type": "link",
                "url": "https://www2.hse.ie/mental-health/issues/sleep-problems/",
            },
            {
                "title": "Mindfulness & Grounding",
                "desc": "Simple exercises to calm your mind.",
                "type": "link",
                "url": "https://www.healthline.com/health/grounding-techniques",
            },
            {
                "title": "Burnout Prevention",
                "desc": "Recognize and prevent overwhelm.",
                "type": "link",
                "url": "https://www.psychiatry.org/news-room/apa-blogs/preventing-burnout-protecting-your-well-being",
            },
            {
                "title": "Healthy Habits Guide",
                "desc": "Small steps to better wellbeing.",
                "type": "link",
                "url": "https://www.nhs.uk/mental-health/self-help/guides-tools-and-activities/five-steps-to-mental-wellbeing/",
            },
        ],
    },
    {
        "heading": "Financial & Practical Support",
        "items": [
            {
                "title": "Financial Stress Support",
                "desc": "Help managing money worries.",
                "type": "link",
                "url": "https://www2.hse.ie/mental-health/life-situations-events/money-worries/",
            },
            {
                "title": "Budgeting Help",
                "desc": "Student budgeting tips and tools.",
                "type": "link",
                "url": "https://www.anpost.com/Money/Managing-Finances/Blog/How-To-Budget-Money-As-a-College-Student",
            },
            {
                "title": "Find Your College Student Assistance Fund",
                "desc": "Search your college’s official Student Assistance Fund page.",
                "type": "link",
                "url": "https://www.google.com/search?q=student+assistance+fund+ireland+college",
            },
        ],
    },
]


@lru_cache
def support_resources() -> ResourcesResponse:
    return ResourcesResponse(
        quick_support=[ResourceItem.model_validate(item) for item in QUICK_SUPPORT],
        sections=[ResourceSection.model_validate(section) for section in RESOURCE_SECTIONS],
    )


__all__ = ["QUICK_SUPPORT", "RESOURCE_SECTIONS", "support_resources"]
