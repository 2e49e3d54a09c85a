from .user import User
from .resume import Resume
from .cover_letter import CoverLetter

__all__ = ["User", "Resume", "CoverLetter"]
