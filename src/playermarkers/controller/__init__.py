"""
The CONTROLLER layer owns the task list and its persistence.
"""
