"""Donation records. Plain storage pass-through; amount validated by the schema."""

from campus_library.models.donation import Donation
from campus_library.services.base import CrudService


class DonationService(CrudService[Donation]):
    model = Donation
    resource = "donation"


donation_service = DonationService()
