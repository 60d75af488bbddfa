"""
Adapters connecting HoopLog to files and the console.
"""
