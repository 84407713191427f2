"""Tech News: a server-rendered community link sharing application."""
