from .mac_address_type import MacAddressType
