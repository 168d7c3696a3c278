"""Hardcoded listings and insight text shown when the live pipeline cannot deliver."""
from __future__ import annotations

from jobscan.log import get_logger
from jobscan.models import JobListing

log = get_logger(__name__)

FALLBACK_JOBS: tuple[dict, ...] = (
    {
        "id": 101,
        "title": "English-Speaking Office Coordinator",
        "company": "TechHub Vienna",
        "location": "Vienna, 1010",
        "type": "Full-time",
        "description": "Manage office logistics and support the international team. "
        "Requires excellent English communication skills.",
        "url": "#",
        "salary": "€32,000 - €36,000",
        "posted": "1 day ago",
    },
    {
        "id": 102,
        "title": "Part-Time Animal Care Assistant",
        "company": "Mödling Vet Clinic",
        "location": "Mödling",
        "type": "Part-time",
        "description": "Assist veterinarians with basic patient care and administrative tasks. "
        "No German required.",
        "url": "#",
        "salary": "€15/hour",
        "posted": "3 days ago",
    },
    {
        "id": 103,
        "title": "Entry-Level Data Entry Specialist",
        "company": "Global Logistics AG",
        "location": "Vienna, 1030",
        "type": "Contract",
        "description": "Input and verify shipping data for European distribution networks. "
        "Fast-paced, detail-oriented work.",
        "url": "#",
        "salary": "Not specified",
        "posted": "1 week ago",
    },
    {
        "id": 104,
        "title": "Hotel Front Desk Intern (Summer)",
        "company": "Imperial Palace Hotel",
        "location": "Vienna, 1070",
        "type": "Internship",
        "description": "Join our hospitality team for a 3-month paid internship. "
        "Focus on guest relations and check-in procedures.",
        "url": "#",
        "salary": "€800/month",
        "posted": "5 days ago",
    },
)

FALLBACK_INSIGHT = """📊 AI Analysis: Based on the **Fallback Data** provided, the results are a good match for "English-speaking entry-level" roles in the hospitality and administrative sectors. You successfully targeted specific locations like Mödling and Vienna.

💡 Tip: Since the job market for English-only roles is competitive, consider broadening your search terms to include roles that may be bilingual but accept English as the primary internal language.

🔑 Suggested keywords to add: 'customer support', 'Bilingual', 'office assistant', 'minijob'
❌ Consider removing: 'fast food' (unless specifically desired), 'animal care' (if you want to focus on office/hospitality)"""


def fallback_jobs() -> list[JobListing]:
    """Fresh listing objects for the fixed dataset, same ids every call."""
    log.info("Loading %d fallback listings", len(FALLBACK_JOBS))
    jobs: list[JobListing] = []
    for index, job in enumerate(FALLBACK_JOBS):
        jobs.append(
            JobListing(
                id=str(job["id"]) if job.get("id") else f"fallback-job-{index}",
                title=job["title"],
                company=job["company"],
                location=job["location"],
                type=job["type"],
                description=job["description"],
                url=job["url"],
                salary=job["salary"],
                posted=job["posted"],
                raw=dict(job),
            )
        )
    return jobs
