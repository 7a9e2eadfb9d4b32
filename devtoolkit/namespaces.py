"""Well-known UUID namespaces from RFC 4122 Appendix C."""
import uuid

NAMESPACE_DNS = uuid.UUID('6ba7b810-9dad-11d1-80b4-00c04fd430c8')
NAMESPACE_URL = uuid.UUID('6ba7b811-9dad-11d1-80b4-00c04fd430c8')
NAMESPACE_OID = uuid.UUID('6ba7b812-9dad-11d1-80b4-00c04fd430c8')
NAMESPACE_X500 = uuid.UUID('6ba7b814-9dad-11d1-80b4-00c04fd430c8')

ALIASES = {
    'dns': NAMESPACE_DNS,
    'url': NAMESPACE_URL,
    'oid': NAMESPACE_OID,
    'x500': NAMESPACE_X500,
}
