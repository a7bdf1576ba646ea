"""Reviews app: star ratings users leave on spots."""
