"""
preparedness — Safety guides, emergency contacts and static reference data.

Sub-modules:
    models      — ORM entities (safety_guides, emergency_contacts)
    repository  — guide (create/read only) and contact (full CRUD) access
    reference   — bundled safety tips, kit checklist, emergency numbers
"""
