"""
Core package: immutable models shared by layout and output.
"""
