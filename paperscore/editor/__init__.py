"""Game-file chooser and game text sections for a score editor."""