"""
FILE: tasknote/core/constants.py
PURPOSE: Constants used throughout the application
EXPORTS:
  - NOTE_TYPE_TEXT / NOTE_TYPE_CHECKLIST / NOTE_TYPE_BOTH: storage discriminators
  - DEFAULT_PREVIEW_LENGTH / DEFAULT_PREVIEW_ITEMS: viewer truncation limits
  - DEFAULT_PRESERVE_CONTENT: format-switch policy when no setting is given
DEPENDENCIES:
  - None (stdlib only)
NOTES:
  - Format tags ("text", "list", "both") live on NoteFormat in models.py
  - Storage discriminators differ from format tags ("checklist" vs "list")
"""

# Normalized storage record discriminators
NOTE_TYPE_TEXT = "text"
NOTE_TYPE_CHECKLIST = "checklist"
NOTE_TYPE_BOTH = "both"

# Viewer defaults
DEFAULT_PREVIEW_LENGTH = 150
DEFAULT_PREVIEW_ITEMS = 3

# Format switch policy
DEFAULT_PRESERVE_CONTENT = True
