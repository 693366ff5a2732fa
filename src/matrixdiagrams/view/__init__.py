"""
The VIEW layer renders diagrams with PySide6 widgets and forwards pointer
hover to the model's grid views.
"""
