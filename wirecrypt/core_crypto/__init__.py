# Core Cryptography Module
"""
Core building blocks:
- CRC32 checksum
- RSA key loading and padding selection
"""
