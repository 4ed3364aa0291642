""" Lets pytest find the utf8machine package from a plain checkout, as `python -m unittest` does. """
