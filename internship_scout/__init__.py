"""Scrape fresh LinkedIn internship postings for allowlisted companies."""
