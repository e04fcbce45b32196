"""NetItem Core"""
