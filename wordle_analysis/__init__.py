"""Letter statistics and guess scoring for the Wordle solution list."""
