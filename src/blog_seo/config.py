"""Runtime settings read from the environment."""

import os
from dataclasses import dataclass

from . import __version__
from .slug import DEFAULT_SITE_URL


@dataclass(frozen=True)
class Settings:
    site_url: str = DEFAULT_SITE_URL
    site_name: str = "My Awesome Blog"
    timeout: float = 30.0
    user_agent: str = f"Mozilla/5.0 (compatible; BlogSEO/{__version__})"

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from ``BLOG_SEO_*`` variables.

        Raises ``ValueError`` naming the variable when ``BLOG_SEO_TIMEOUT``
        is not a number.
        """
        raw_timeout = os.getenv("BLOG_SEO_TIMEOUT")
        timeout = cls.timeout
        if raw_timeout is not None:
            try:
                timeout = float(raw_timeout)
            except ValueError:
                raise ValueError(
                    f"BLOG_SEO_TIMEOUT must be a number of seconds, got {raw_timeout!r}"
                ) from None

        return cls(
            site_url=os.getenv("BLOG_SEO_SITE_URL", cls.site_url),
            site_name=os.getenv("BLOG_SEO_SITE_NAME", cls.site_name),
            timeout=timeout,
            user_agent=os.getenv("BLOG_SEO_USER_AGENT", cls.user_agent),
        )
