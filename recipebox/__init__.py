"""
Recipe Box - personal recipe management API.
"""
