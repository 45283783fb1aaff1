"""Zombie Shooter: top-down arcade shooter built on pygame."""
