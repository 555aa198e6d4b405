"""Server-rendered Home section of the portfolio page.

The section is pure composition: `render_home` stitches the Social, Data and
ScrollDown fragments into the home grid. Nothing here holds state or touches
the database.
"""

from dataclasses import dataclass, field
from html import escape
from typing import List, Optional
from urllib.parse import urlparse

from ..config import settings


@dataclass
class Profile:
    """Text and links shown in the Home section."""
    name: str
    role: str
    description: str
    social_links: List[str] = field(default_factory=list)

    @classmethod
    def from_settings(cls) -> "Profile":
        return cls(
            name=settings.PROFILE_NAME,
            role=settings.PROFILE_ROLE,
            description=settings.PROFILE_DESCRIPTION,
            social_links=list(settings.PROFILE_SOCIAL_LINKS),
        )


def _link_label(url: str) -> str:
    host = urlparse(url).netloc.lower()
    if host.startswith("www."):
        host = host[4:]
    return host.split(".")[0] or url


def render_social(links: List[str]) -> str:
    """Column of external profile links, each opening in a new tab."""
    anchors = "".join(
        f'<a href="{escape(url)}" class="home-social-icon" target="_blank" rel="noreferrer">'
        f'{escape(_link_label(url))}</a>'
        for url in links
    )
    return f'<div class="home-social">{anchors}</div>'


def render_data(profile: Profile) -> str:
    """Name, role, short description and the contact button."""
    return (
        '<div class="home-data">'
        f'<h1 class="home-title">{escape(profile.name)}</h1>'
        f'<h3 class="home-subtitle">{escape(profile.role)}</h3>'
        f'<p class="home-description">{escape(profile.description)}</p>'
        '<a href="#contact" class="button button-flex">Say Hello</a>'
        '</div>'
    )


def render_scroll_down() -> str:
    return (
        '<div class="home-scroll">'
        '<a href="#about" class="home-scroll-button button-flex">'
        '<span class="home-scroll-name">Scroll Down</span>'
        '</a>'
        '</div>'
    )


def render_home(profile: Optional[Profile] = None) -> str:
    """Return the `<section id="home">` markup."""
    profile = profile or Profile.from_settings()
    return (
        '<section class="home section" id="home">'
        '<div class="home-container container grid">'
        '<div class="home-content grid">'
        f'{render_social(profile.social_links)}'
        '<div class="home-img"></div>'
        f'{render_data(profile)}'
        '</div>'
        f'{render_scroll_down()}'
        '</div>'
        '</section>'
    )


def render_home_page(profile: Optional[Profile] = None) -> str:
    """Wrap the Home section in a complete HTML document."""
    profile = profile or Profile.from_settings()
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8" />
  <meta name="viewport" content="width=device-width, initial-scale=1.0" />
  <title>{escape(profile.name)} | Portfolio</title>
  <link rel="stylesheet" href="/static/home.css" />
</head>
<body>
  <main class="main">
    {render_home(profile)}
  </main>
</body>
</html>
"""
