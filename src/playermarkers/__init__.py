"""Map overlay markers kept in sync with the player's task list."""
