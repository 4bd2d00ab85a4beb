"""
Star Shooter
"""
