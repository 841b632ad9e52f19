"""patternbook - Object-oriented design pattern examples."""
