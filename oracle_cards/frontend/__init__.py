"""FastHTML frontend for the All Cards screen."""
