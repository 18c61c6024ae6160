"""Error reporting and interactive front end for skilisp."""
