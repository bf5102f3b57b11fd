"""RudeShare — an anonymous message board that bans politeness."""

__version__ = "0.1.0"
