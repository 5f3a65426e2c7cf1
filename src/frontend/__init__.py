"""Flask front end for the context search engine (see frontend.web)."""
