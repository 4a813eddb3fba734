"""
preferences — The single user-settings record (location, notifications,
theme, chosen emergency contact).
"""
