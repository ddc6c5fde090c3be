"""User interface: presenters and the Tkinter desktop window."""
