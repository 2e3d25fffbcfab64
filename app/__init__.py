"""
Wordlink application package.

Layered the same way for every component:

  app/repositories/  — pure I/O: loading puzzle definitions from JSON files.
  app/services/      — business logic: game lookup, word selection, shuffling.

``PuzzleService`` is the integration point: it is built from a loaded
``GameStore`` plus the selection/shuffling services and is handed to the
Flask application factory in ``wordlink_web.py`` and to the CLI in
``wordlink.py``.  Neither entry point reaches into the repositories directly.
"""
