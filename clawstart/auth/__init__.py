"""Auth provider choice metadata and prompt flow."""
