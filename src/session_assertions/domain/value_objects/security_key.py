SECURITY_KEY_PREFIX = "_security_"


class SecurityKey(str):
    """Value Object for the session key holding a firewall's token."""
    def __new__(cls, value: str) -> "SecurityKey":
        assert value.startswith(SECURITY_KEY_PREFIX) and len(value) > len(SECURITY_KEY_PREFIX), "Invalid SecurityKey"
        return str.__new__(cls, value)

    @classmethod
    def for_firewall(cls, firewall_name: str, firewall_context: str | None = None) -> "SecurityKey":
        return cls(SECURITY_KEY_PREFIX + (firewall_context or firewall_name))
