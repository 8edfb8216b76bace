"""Data types describing a character manifest and its parts."""