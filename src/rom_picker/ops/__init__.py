"""File operations for rom-picker.

Submodules:
    deliver -- Copies the winning candidate from the source directory into the
               destination under its original display name (shutil.copy2,
               overwriting), then checks the destination exists. Copy errors
               raise CopyFailure, a missing destination raises
               CopyVerificationMismatch. Dry-run returns the would-be path
               without writing. Also writes the final missed-titles list.
"""
