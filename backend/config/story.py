"""
Story generation constants for the Bedtime Story Generator.
"""

from ..core.types import Theme

# Story generation constants
STORY_CONSTANTS = {
    "max_child_name_length": 50,
    "min_word_count": 1000,
    "max_word_count": 1200,
    "min_reader_age": 4,
    "max_reader_age": 10,
}

# Lesson phrase woven into the prompt for each theme
THEME_LESSONS: dict[Theme, str] = {
    Theme.FRIENDSHIP: "the importance of making friends and being kind to others",
    Theme.COURAGE: "being brave even when things seem scary or difficult",
    Theme.SHARING: "the joy of sharing and caring for others",
    Theme.HONESTY: "the value of telling the truth and being honest",
    Theme.PERSEVERANCE: "never giving up even when things are hard",
    Theme.EMPATHY: "understanding and caring about how others feel",
    Theme.CURIOSITY: "the excitement of exploring and learning new things",
}
