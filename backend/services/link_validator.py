"""Reachability and trust checks for learning-resource links.

Served by the ``/links/*`` routes: raw URL checks, checks over whole
resource lists, and a static fallback list per category.
"""

import asyncio
import logging
from urllib.parse import urlparse

import httpx

from models.schemas.learning_resource import LearningResource, LinkCheck

logger = logging.getLogger(__name__)

TRUSTED_DOMAINS: frozenset[str] = frozenset({
    # Learning platforms
    "freecodecamp.org", "codecademy.com", "pluralsight.com", "udemy.com",
    "coursera.org", "edx.org", "khanacademy.org", "sololearn.com", "code.org",
    "scrimba.com", "udacity.com", "educative.io", "skillshare.com",
    # Documentation & tutorials
    "geeksforgeeks.org", "tutorialspoint.com", "w3schools.com", "javascript.info",
    "realpython.com", "javatpoint.com", "programiz.com", "baeldung.com",
    # Community & blogs
    "dev.to", "stackoverflow.com", "hashnode.com", "medium.com", "css-tricks.com",
    "smashingmagazine.com", "sitepoint.com", "digitalocean.com", "blog.logrocket.com",
    # Practice platforms
    "leetcode.com", "hackerrank.com", "codewars.com", "codechef.com",
    "codeforces.com", "exercism.org", "projecteuler.net", "atcoder.jp",
    "interviewbit.com", "hackerearth.com", "neetcode.io",
    # Video
    "youtube.com", "youtu.be", "vimeo.com", "egghead.io",
    # Official documentation
    "react.dev", "vuejs.org", "angular.io", "nodejs.org", "expressjs.com",
    "python.org", "docs.python.org", "docs.djangoproject.com", "fastapi.tiangolo.com",
    "spring.io", "go.dev", "rust-lang.org", "kotlinlang.org", "swift.org",
    "developer.mozilla.org", "postgresql.org", "mongodb.com", "redis.io",
    "kubernetes.io", "docker.com", "aws.amazon.com", "cloud.google.com",
    "azure.microsoft.com",
    # Tools & version control
    "codepen.io", "replit.com", "codesandbox.io", "github.com", "gitlab.com",
    "git-scm.com",
})

FALLBACK_RESOURCES: dict[str, tuple[dict[str, str], ...]] = {
    "Theory": (
        {"title": "freeCodeCamp", "link": "https://freecodecamp.org", "summary": "Free interactive lessons and projects", "difficulty": "Beginner"},
        {"title": "JavaScript.info", "link": "https://javascript.info", "summary": "Modern JavaScript tutorial with detailed examples", "difficulty": "Intermediate"},
        {"title": "Dev.to Community", "link": "https://dev.to", "summary": "In-depth community articles and technical discussions", "difficulty": "Advanced"},
    ),
    "Videos": (
        {"title": "freeCodeCamp YouTube", "link": "https://youtube.com/c/freecodecamp", "summary": "Free full-length programming courses", "difficulty": "Beginner"},
        {"title": "Traversy Media", "link": "https://youtube.com/c/TraversyMedia", "summary": "Web development crash courses", "difficulty": "Intermediate"},
        {"title": "Fireship", "link": "https://youtube.com/c/Fireship", "summary": "Fast-paced concept overviews", "difficulty": "Advanced"},
    ),
    "Docs": (
        {"title": "W3Schools", "link": "https://w3schools.com", "summary": "References with interactive examples", "difficulty": "Beginner"},
        {"title": "React Documentation", "link": "https://react.dev", "summary": "Official React guides and API reference", "difficulty": "Intermediate"},
        {"title": "Python Official Docs", "link": "https://python.org", "summary": "Python language documentation and tutorials", "difficulty": "Advanced"},
    ),
    "Practice": (
        {"title": "Codewars", "link": "https://codewars.com", "summary": "Kata challenges with community solutions", "difficulty": "Beginner"},
        {"title": "HackerRank", "link": "https://hackerrank.com", "summary": "Interview preparation challenges", "difficulty": "Intermediate"},
        {"title": "LeetCode", "link": "https://leetcode.com", "summary": "Algorithm and data structure problems", "difficulty": "Advanced"},
    ),
}


class LinkValidator:
    """Checks links against a trusted-domain registry and for reachability.

    Both the registry and the HTTP client are injected; nothing here reads
    module state at call time.
    """

    def __init__(self, client: httpx.AsyncClient, trusted_domains: frozenset[str] = TRUSTED_DOMAINS) -> None:
        self._client = client
        self._trusted = trusted_domains

    @staticmethod
    def get_domain(url: str) -> str | None:
        try:
            host = urlparse(url).hostname
        except ValueError:
            return None
        if not host:
            return None
        return host.lower().removeprefix("www.")

    def is_trusted_domain(self, url: str) -> bool:
        domain = self.get_domain(url)
        return domain in self._trusted if domain else False

    async def is_link_alive(self, url: str) -> bool:
        """HEAD first, then GET for servers that reject HEAD. 2xx/3xx counts as alive."""
        for method in ("HEAD", "GET"):
            try:
                response = await self._client.request(method, url, follow_redirects=True)
            except httpx.HTTPError as e:
                logger.debug("%s %s failed: %s", method, url, e)
                continue
            if 200 <= response.status_code < 400:
                return True
        return False

    async def validate_link(self, url: str) -> LinkCheck:
        domain = self.get_domain(url)
        if not domain:
            return LinkCheck(url=url, isValid=False, status="invalid", error="Invalid URL")
        if not await self.is_link_alive(url):
            return LinkCheck(url=url, isValid=False, status="invalid", error="Link not reachable")
        status = "verified" if domain in self._trusted else "unverified"
        return LinkCheck(url=url, isValid=True, status=status)

    async def validate_links(self, urls: list[str]) -> list[LinkCheck]:
        return list(await asyncio.gather(*(self.validate_link(url) for url in urls)))

    async def validate_resources(self, resources: list[LearningResource]) -> list[LearningResource]:
        checks = await self.validate_links([r.link for r in resources])
        validated = []
        for resource, check in zip(resources, checks):
            status = {"verified": "valid"}.get(check.status, check.status)
            validated.append(
                resource.model_copy(update={"isValidated": check.isValid, "validationStatus": status})
            )
        return validated


def fallback_resources(category: str) -> list[LearningResource]:
    return [LearningResource(**entry) for entry in FALLBACK_RESOURCES.get(category, ())]
