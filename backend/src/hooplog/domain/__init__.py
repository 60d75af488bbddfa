"""
Domain layer for HoopLog: models, metrics and services.
"""
