# ABOUTME: PocketLibrary - a library catalog client with offline sample-data fallback.
# ABOUTME: Searches Open Library, tracks reservations, reviews, and fines for one session.
