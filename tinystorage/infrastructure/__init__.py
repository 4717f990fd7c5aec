"""Infrastructure layer: disk backend and logging"""
