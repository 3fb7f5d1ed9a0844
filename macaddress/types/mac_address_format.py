from enum import Enum


class MacAddressFormat(str, Enum):
    canonical = "canonical"  # 12:34:56:AB:CD:EF
    hex_string = "hex_string"  # 12-34-56-AB-CD-EF
    dot_notation = "dot_notation"  # 1234.56AB.CDEF
    hexadecimal = "hexadecimal"  # 0x123456ABCDEF
