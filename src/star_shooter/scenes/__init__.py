"""
Star Shooter scenes
"""
