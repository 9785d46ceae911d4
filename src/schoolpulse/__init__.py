"""SchoolPulse: school-community relationship health survey service."""
