"""JA3 TLS fingerprint selection: which ClientHello a client presents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from surfprint.tlsspec import ClientHelloSpec


@dataclass(frozen=True)
class ClientHelloID:
    """A predefined ClientHello, named by client and version."""

    client: str
    version: str

    def __str__(self) -> str:
        return f"{self.client}-{self.version}"


HELLO_ANDROID_11_OKHTTP = ClientHelloID("Android", "11")

HELLO_CHROME_AUTO = ClientHelloID("Chrome", "auto")
HELLO_CHROME_58 = ClientHelloID("Chrome", "58")
HELLO_CHROME_62 = ClientHelloID("Chrome", "62")
HELLO_CHROME_70 = ClientHelloID("Chrome", "70")
HELLO_CHROME_72 = ClientHelloID("Chrome", "72")
HELLO_CHROME_83 = ClientHelloID("Chrome", "83")
HELLO_CHROME_87 = ClientHelloID("Chrome", "87")
HELLO_CHROME_96 = ClientHelloID("Chrome", "96")
HELLO_CHROME_100 = ClientHelloID("Chrome", "100")
HELLO_CHROME_102 = ClientHelloID("Chrome", "102")
HELLO_CHROME_106_SHUFFLE = ClientHelloID("Chrome", "106_shuffle")
HELLO_CHROME_120 = ClientHelloID("Chrome", "120")
HELLO_CHROME_120_PQ = ClientHelloID("Chrome", "120_pq")
HELLO_CHROME_131 = ClientHelloID("Chrome", "131")

HELLO_EDGE_85 = ClientHelloID("Edge", "85")
HELLO_EDGE_106 = ClientHelloID("Edge", "106")

HELLO_FIREFOX_AUTO = ClientHelloID("Firefox", "auto")
HELLO_FIREFOX_55 = ClientHelloID("Firefox", "55")
HELLO_FIREFOX_56 = ClientHelloID("Firefox", "56")
HELLO_FIREFOX_63 = ClientHelloID("Firefox", "63")
HELLO_FIREFOX_65 = ClientHelloID("Firefox", "65")
HELLO_FIREFOX_99 = ClientHelloID("Firefox", "99")
HELLO_FIREFOX_102 = ClientHelloID("Firefox", "102")
HELLO_FIREFOX_105 = ClientHelloID("Firefox", "105")
HELLO_FIREFOX_120 = ClientHelloID("Firefox", "120")

HELLO_IOS_AUTO = ClientHelloID("iOS", "auto")
HELLO_IOS_11_1 = ClientHelloID("iOS", "11.1")
HELLO_IOS_12_1 = ClientHelloID("iOS", "12.1")
HELLO_IOS_13 = ClientHelloID("iOS", "13")
HELLO_IOS_14 = ClientHelloID("iOS", "14")

HELLO_RANDOMIZED = ClientHelloID("Randomized", "0")
HELLO_RANDOMIZED_ALPN = ClientHelloID("Randomized-ALPN", "0")
HELLO_RANDOMIZED_NO_ALPN = ClientHelloID("Randomized-NoALPN", "0")

HELLO_SAFARI_AUTO = ClientHelloID("Safari", "auto")


class JA:
    """Fluent chooser of the TLS ClientHello fingerprint."""

    def __init__(self) -> None:
        self._id: Optional[ClientHelloID] = None
        self._spec: Optional[ClientHelloSpec] = None

    def set_hello_id(self, hello_id: ClientHelloID) -> JA:
        """Use a predefined ClientHello."""
        if not isinstance(hello_id, ClientHelloID):
            raise TypeError(f"expected ClientHelloID, got {type(hello_id).__name__}")
        self._id = hello_id
        return self

    def set_hello_spec(self, spec: ClientHelloSpec) -> JA:
        """Use a custom ClientHello specification."""
        if not isinstance(spec, ClientHelloSpec):
            raise TypeError(f"expected ClientHelloSpec, got {type(spec).__name__}")
        self._spec = spec
        return self

    def resolved(self) -> Union[ClientHelloID, ClientHelloSpec]:
        """The ClientHello to present: a set identifier first, else the custom spec.

        Raises ValueError when neither has been configured.
        """
        if self._id is not None:
            return self._id
        if self._spec is not None:
            return self._spec
        raise ValueError("no ClientHelloID or ClientHelloSpec configured")

    def android(self) -> JA:
        return self.set_hello_id(HELLO_ANDROID_11_OKHTTP)

    def chrome(self) -> JA:
        return self.set_hello_id(HELLO_CHROME_AUTO)

    def chrome58(self) -> JA:
        return self.set_hello_id(HELLO_CHROME_58)

    def chrome62(self) -> JA:
        return self.set_hello_id(HELLO_CHROME_62)

    def chrome70(self) -> JA:
        return self.set_hello_id(HELLO_CHROME_70)

    def chrome72(self) -> JA:
        return self.set_hello_id(HELLO_CHROME_72)

    def chrome83(self) -> JA:
        return self.set_hello_id(HELLO_CHROME_83)

    def chrome87(self) -> JA:
        return self.set_hello_id(HELLO_CHROME_87)

    def chrome96(self) -> JA:
        return self.set_hello_id(HELLO_CHROME_96)

    def chrome100(self) -> JA:
        return self.set_hello_id(HELLO_CHROME_100)

    def chrome102(self) -> JA:
        return self.set_hello_id(HELLO_CHROME_102)

    def chrome106(self) -> JA:
        return self.set_hello_id(HELLO_CHROME_106_SHUFFLE)

    def chrome120(self) -> JA:
        return self.set_hello_id(HELLO_CHROME_120)

    def chrome120_pq(self) -> JA:
        return self.set_hello_id(HELLO_CHROME_120_PQ)

    def chrome131(self) -> JA:
        return self.set_hello_id(HELLO_CHROME_131)

    def edge(self) -> JA:
        return self.set_hello_id(HELLO_EDGE_85)

    def edge85(self) -> JA:
        return self.set_hello_id(HELLO_EDGE_85)

    def edge106(self) -> JA:
        return self.set_hello_id(HELLO_EDGE_106)

    def firefox(self) -> JA:
        return self.set_hello_id(HELLO_FIREFOX_AUTO)

    def firefox55(self) -> JA:
        return self.set_hello_id(HELLO_FIREFOX_55)

    def firefox56(self) -> JA:
        return self.set_hello_id(HELLO_FIREFOX_56)

    def firefox63(self) -> JA:
        return self.set_hello_id(HELLO_FIREFOX_63)

    def firefox65(self) -> JA:
        return self.set_hello_id(HELLO_FIREFOX_65)

    def firefox99(self) -> JA:
        return self.set_hello_id(HELLO_FIREFOX_99)

    def firefox102(self) -> JA:
        return self.set_hello_id(HELLO_FIREFOX_102)

    def firefox105(self) -> JA:
        return self.set_hello_id(HELLO_FIREFOX_105)

    def firefox120(self) -> JA:
        return self.set_hello_id(HELLO_FIREFOX_120)

    def firefox131(self) -> JA:
        """Firefox 131 presents the same ClientHello as Firefox 120."""
        return self.set_hello_id(HELLO_FIREFOX_120)

    def ios(self) -> JA:
        return self.set_hello_id(HELLO_IOS_AUTO)

    def ios11(self) -> JA:
        return self.set_hello_id(HELLO_IOS_11_1)

    def ios12(self) -> JA:
        return self.set_hello_id(HELLO_IOS_12_1)

    def ios13(self) -> JA:
        return self.set_hello_id(HELLO_IOS_13)

    def ios14(self) -> JA:
        return self.set_hello_id(HELLO_IOS_14)

    def randomized(self) -> JA:
        return self.set_hello_id(HELLO_RANDOMIZED)

    def randomized_alpn(self) -> JA:
        return self.set_hello_id(HELLO_RANDOMIZED_ALPN)

    def randomized_no_alpn(self) -> JA:
        return self.set_hello_id(HELLO_RANDOMIZED_NO_ALPN)

    def safari(self) -> JA:
        return self.set_hello_id(HELLO_SAFARI_AUTO)