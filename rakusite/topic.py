"""Topics listed on the site, with their links and descriptions."""

from __future__ import annotations

import random
import threading
from enum import Enum
from typing import Protocol, Sequence

from rakusite.status import Status

QUOTES: tuple[str, ...] = (
    "\"Victory belongs to the most persevering.\" - Napoleon Bonaparte",
    "\"Sharing knowledge is the most fundamental act of friendship. Because it is a way "
    "you can give something without loosing something.\" - Richard Stallman",
    "\"The average consumer does not know the difference between browser, Internet and "
    "search box.\" - Mitchell Baker",
    "\"Never confuse a single defeat with a final defeat\" -  F. Scott Fitzgerald",
    "\"I mean, if 10 years from now, when you are doing something quick and dirty, you "
    "suddenly visualize that I am looking over your shoulders and say to yourself "
    "\"Dijkstra would not have liked this\", well, that would be enough immortality for "
    "me.\" - Edsger W. Dijkstra",
    "\"The question of whether a computer can think is no more interesting than the "
    "question of whether a submarine can swim.\" - Edsger W. Dijkstra",
    "\"The use of COBOL cripples the mind; its teaching should, therefore, be regarded "
    "as a criminal offense.\" - Edsger W. Dijkstra",
    "\"The most important property of a program is whether it accomplishes the "
    "intention of its user.\" - Graydon Hoare",
    "\"I think, fundamentally, open source does tend to be more stable software. It's "
    "the right way to do things.\" - Linus Torvalds",
    "\"Fully secure systems don't exist today and they won't exist in the future.\" "
    "- Adi Shamir",
    "\"Information is the resolution of uncertainty.\" - Claude Shannon",
    "\"Weak typing is a devil plaguing software correctness. It tempts you with ease of "
    "development, while secretly hiding undefined behaviour in the code.\" - Anonymous",
    "\"Only sneaky people and impostors can oppose the progress of sciences and can "
    "discredit them, because they are the only ones to whom the sciences do harm.\" "
    "- Friedrich der Große",
)

_FALLBACK_QUOTE = QUOTES[0]


class _Chooser(Protocol):
    def choice(self, seq: Sequence[str]) -> str: ...


class Topic(Enum):
    """An entry of the site's menu."""

    ABOUT = "About"
    CONTACT = "Contact"
    CV = "Cv"
    DONATE = "Donate"
    QUOTE = "Quote"
    SOCIAL = "Social"
    SUMMARY = "Summary"
    CREDITS = "Credits"

    def __str__(self) -> str:
        return self.value

    def link(self) -> str:
        """The URL opened for this topic, or an empty string if it has none."""
        return _LINKS.get(self, "")

    def description(self, status: Status) -> str:
        """Text shown when the topic is selected.

        The quote topic draws a fresh random quote while it is still to do and
        keeps showing the last drawn quote once completed.
        """
        if self is Topic.QUOTE:
            if status is Status.COMPLETED:
                return _last_quote.get()
            quote = random_quote()
            _last_quote.set(quote)
            return quote
        return _DESCRIPTIONS[self]


def random_quote(rng: _Chooser | None = None) -> str:
    """Pick one of the known quotes at random."""
    if not QUOTES:
        return _FALLBACK_QUOTE
    return (rng or random).choice(QUOTES)


class _LastQuote:
    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._value = ""

    def get(self) -> str:
        with self._lock:
            return self._value

    def set(self, value: str) -> None:
        with self._lock:
            self._value = value


_last_quote = _LastQuote()

_LINKS = {
    Topic.DONATE: "https://donate.example.com/site-owner",
    Topic.SOCIAL: "https://social.example.com/in/site-owner",
    Topic.CONTACT: "mailto:hello@example.com",
    Topic.CV: "https://example.com/cv.pdf",
    Topic.CREDITS: "https://example.com/credits",
}

_DESCRIPTIONS = {
    Topic.ABOUT: """
    ░█▀▀░▀█▀░▀█▀░█▀▀
    ░▀▀█░░█░░░█░░█▀▀
    ░▀▀▀░▀▀▀░░▀░░▀▀▀

    I'm a software developer & cybersecurity major.
    This is an interactive website, in which you'll use the TUI with your keyboard to know more about myself.""",
    Topic.CV: (
        "Software developer, space enthusiast and much more. Copy the link or open "
        "with CTRL + ENTER to learn more about myself:\n\n"
        "https://example.com/cv.pdf"
    ),
    Topic.CONTACT: (
        "I have various email addresses, each divided by topic:\n\n"
        "- mailto:hello@example.com \n"
        "- mailto:work@example.com \n"
        "- mailto:projects@example.com\n"
    ),
    Topic.DONATE: (
        "Thank you for your interest, here are the ways in which you can support my work:\n\n"
        "- https://donate.example.com/site-owner \n"
        "- https://tips.example.com/site-owner\n"
    ),
    Topic.SOCIAL: (
        "https://social.example.com/in/site-owner \n"
        "https://code.example.com/site-owner\n"
    ),
    Topic.SUMMARY: """
              ./o.                  🚗 My daily drivers: EndeavourOS | CachyOS
            ./sssso-                --------------------
           :osssssss+-              📡 ABOUT
         :+sssssssssso/.            🌌 whoami => site owner
       -/ossssssssssssso/.          📑 Resume 🔽
     -/+sssssssssssssssso+:         🔗 https://example.com/cv.pdf
   -:/+sssssssssssssssssso+/.       -----------
 .://osssssssssssssssssssso++-      🎉 SOCIALS 🔽
.://+ssssssssssssssssssssssso++:    💻 https://code.example.com/site-owner
:///ossssssssssssssssssssssssso++:  🏢 https://social.example.com/in/site-owner
:////ssssssssssssssssssssssssssso+++. -----------
-////+ssssssssssssssssssssssssssso++++- 🎁 DONATE 🔽
 ..-+oosssssssssssssssssssssssso+++++/  💰 https://donate.example.com/site-owner
  ./++++++++++++++++++++++++++++++/:.   💸 https://tips.example.com/site-owner
  :::::::::::::::::::::::::------

 mailto:hello@example.com | mailto:work@example.com | mailto:projects@example.com
""",
    Topic.CREDITS: (
        "MADE WITH ♥ using a fantastic terminal UI library => https://example.com/credits\n"
    ),
}