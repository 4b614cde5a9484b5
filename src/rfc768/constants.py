"""
Protocol constants from RFC 768.

Reference: https://www.rfc-editor.org/rfc/rfc768
"""

# IP protocol number carried in the pseudo-header
PROTOCOL_NUMBER = 17

# Header is four 16-bit fields
HEADER_SIZE = 8

# Length field counts the header, so 8 is the smallest legal value
MINIMUM_LENGTH = HEADER_SIZE

# 16-bit field limits
MAXIMUM_LENGTH = 0xFFFF
MAXIMUM_PAYLOAD = MAXIMUM_LENGTH - HEADER_SIZE

# Pseudo-header: two IPv4 addresses + zero + protocol + length
PSEUDO_HEADER_SIZE = 12
