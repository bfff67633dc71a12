"""moodlens: weekly mood and risk analytics."""
