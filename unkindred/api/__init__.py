"""HTTP surface: one game session driven over REST."""
