"""
Default site catalog for background traffic.
"""
from typing import Tuple

from models.packet import SiteTarget

DEFAULT_SITES: Tuple[SiteTarget, ...] = (
    SiteTarget("https://www.google.com/search?q=network+diagnostics", "Google"),
    SiteTarget("http://www.microsoft.com", "Microsoft"),
    SiteTarget("http://www.amazon.com.au", "Amazon"),
    SiteTarget("http://www.facebook.com", "Facebook"),
    SiteTarget("https://www.youtube.com", "YouTube"),
    SiteTarget("http://www.apple.com", "Apple"),
    SiteTarget("http://www.github.com", "GitHub"),
    SiteTarget("http://www.linkedin.com", "LinkedIn"),
    SiteTarget("http://www.reddit.com", "Reddit"),
    SiteTarget("http://www.twitter.com", "Twitter"),
    SiteTarget("http://www.wikipedia.org", "Wikipedia"),
    SiteTarget("http://www.instagram.com", "Instagram"),
    SiteTarget("http://www.netflix.com", "Netflix"),
    SiteTarget("http://www.spotify.com", "Spotify"),
    SiteTarget("http://www.stackoverflow.com", "StackOverflow"),
    SiteTarget("http://www.medium.com", "Medium"),
    SiteTarget("http://www.quora.com", "Quora"),
    SiteTarget("http://www.udemy.com", "Udemy"),
    SiteTarget("http://www.coursera.org", "Coursera"),
    SiteTarget("http://www.khanacademy.org", "Khan Academy"),
)
