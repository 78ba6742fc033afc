"""Crowdfunding backend: campaigns, donations and user signup."""
