"""
The VIEW layer holds the Qt widgets that paint the model.
"""
