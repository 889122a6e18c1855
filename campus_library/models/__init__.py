"""
ORM models. Importing this package registers every table with Base.metadata
(used by Alembic autogenerate and by create_all_tables()).
"""

from campus_library.models.book import Book, BookBorrow
from campus_library.models.contact_message import ContactMessage
from campus_library.models.donation import Donation
from campus_library.models.event import Event
from campus_library.models.library_card import LibraryCardApplication
from campus_library.models.note import Note
from campus_library.models.notification import Notification
from campus_library.models.rare_book import RareBook
from campus_library.models.user import Profile, User

__all__ = [
    "Book",
    "BookBorrow",
    "ContactMessage",
    "Donation",
    "Event",
    "LibraryCardApplication",
    "Note",
    "Notification",
    "Profile",
    "RareBook",
    "User",
]
