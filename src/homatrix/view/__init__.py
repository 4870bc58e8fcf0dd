"""
The VIEW layer turns matrices into human-readable text.
It only reads matrices through their public accessors.
"""
