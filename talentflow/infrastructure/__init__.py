"""Infrastructure — local store engine and logging setup (the imperative shell)."""
