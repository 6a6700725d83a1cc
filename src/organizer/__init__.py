"""Task, comment and group organizer backend."""
