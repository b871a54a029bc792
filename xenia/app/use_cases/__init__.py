"""
Use Cases

Organized by domain folder:
- authorization/: session -> membership -> role pipeline
- auth/: invite acceptance, login, logout, current user
- invitations/: issuing invitations
- properties/: property CRUD
- reservations/: reservation CRUD, calendar, owner summary
"""
