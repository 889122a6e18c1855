# Services package init
"""
Campus Library Backend — Services Layer
=========================================

What:  Storage accessors and the few business rules that sit between routes
       (HTTP) and the ORM models (persistence).
How:   Each service is a module-level singleton. Methods take the request's
       AsyncSession as their first argument and raise LibraryError
       subclasses; they never build HTTP responses.

Service Inventory:
    - CrudService (base): list/get/create/update/delete/toggle for one model
    - AuthService: the three login paths and session identity lookup
    - UserService / ProfileService: registration, admin listing, profile upsert
    - BookService / BorrowService: catalog and borrow ledger
    - LibraryCardService: applications, card numbers, approval
    - RareBookService / NoteService: PDF archives with active/inactive status
    - EventService / NotificationService / ContactService / DonationService
    - FileService: upload validation, storage, and cleanup
"""
