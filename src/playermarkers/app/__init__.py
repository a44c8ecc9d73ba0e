"""
The APP layer holds the Qt view-models the overlay binds to.
Collections announce their changes through Qt signals.
"""
