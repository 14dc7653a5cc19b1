"""Shikkha Pro backend - transactional email notifications and site settings"""
