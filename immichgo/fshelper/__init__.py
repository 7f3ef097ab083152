"""File helpers: a reader that keeps a stream's content in a file for repeated reads."""