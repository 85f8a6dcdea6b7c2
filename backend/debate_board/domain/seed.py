"""Sample topics shown on first run, before anything has been persisted."""
from __future__ import annotations

from typing import List

from .topic import Category, Reply, Topic


def sample_topics() -> List[Topic]:
    # Built fresh on every call so callers may mutate the result freely.
    return [
        Topic(
            id=1,
            title="Should Social Media Be Regulated Like Public Utilities?",
            content=(
                "As social media platforms continue to dominate our communication landscape, "
                "should they be regulated like public utilities? These platforms now serve "
                "essential communication functions in society, but they're run by private "
                "companies with profit motives. Does this create conflicts of interest that "
                "harm the public good?"
            ),
            author="Moderator",
            category=Category.POLITICS,
            date="2025-04-28T12:00:00Z",
            replies=[
                Reply(
                    id=101,
                    author="DebateEnthusiast",
                    content=(
                        "I believe regulation is necessary. These platforms have become too "
                        "central to public discourse to remain unregulated. When a private "
                        "company controls what is essentially the modern public square, there "
                        "needs to be oversight."
                    ),
                    date="2025-04-29T09:15:00Z",
                ),
                Reply(
                    id=102,
                    author="FreeMarket42",
                    content=(
                        "Disagree strongly. Government regulation would stifle innovation and "
                        "potentially lead to censorship issues. The market will correct problems "
                        "if users demand better practices."
                    ),
                    date="2025-04-30T14:22:00Z",
                ),
            ],
        ),
        Topic(
            id=2,
            title="Is AI Art Really Art?",
            content=(
                "With the rise of AI-generated images, music, and writing, we need to "
                "reconsider what constitutes 'art.' Does art require human intention, emotion, "
                "and experience? Or can something created by an algorithm based on patterns "
                "from human art still be considered legitimate art?"
            ),
            author="ArtPhilosopher",
            category=Category.SOCIETY,
            date="2025-05-01T08:30:00Z",
            replies=[
                Reply(
                    id=201,
                    author="TraditionalistView",
                    content=(
                        "Art is fundamentally human expression. While AI can create interesting "
                        "images, they lack the lived experience and emotional intent that gives "
                        "art its depth and meaning."
                    ),
                    date="2025-05-01T10:45:00Z",
                ),
            ],
        ),
        Topic(
            id=3,
            title="Should High School Education Focus More on Practical Skills?",
            content=(
                "Many students graduate high school without basic financial literacy, home "
                "economics skills, or career preparation. Should schools reduce focus on "
                "traditional academic subjects to make room for more practical life skills?"
            ),
            author="EducationReformer",
            category=Category.EDUCATION,
            date="2025-05-02T15:20:00Z",
            replies=[],
        ),
    ]
