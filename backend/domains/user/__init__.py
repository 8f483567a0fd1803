"""User domain: application users and their community memberships."""
