"""Centralized constant definitions for wiretext."""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Protocol display names keyed by the lowercase token dissectors print
# ---------------------------------------------------------------------------
PROTOCOL_DISPLAY_NAMES: dict[str, str] = {
    "eth": "Ethernet",
    "ethertype": "Ethernet",
    "ethernet": "Ethernet",
    "ip": "IP",
    "ipv4": "IPv4",
    "ipv6": "IPv6",
    "tcp": "TCP",
    "udp": "UDP",
    "tls": "TLS",
    "ssl": "SSL",
    "http": "HTTP",
    "https": "HTTPS",
    "dns": "DNS",
    "arp": "ARP",
    "icmp": "ICMP",
    "icmpv6": "ICMPv6",
    "dhcp": "DHCP",
    "ntp": "NTP",
    "ssh": "SSH",
    "ftp": "FTP",
    "ftp-data": "FTP-DATA",
    "smtp": "SMTP",
    "imap": "IMAP",
    "pop": "POP3",
    "sip": "SIP",
    "rtp": "RTP",
    "rtcp": "RTCP",
    "snmp": "SNMP",
    "ldap": "LDAP",
    "smb": "SMB",
    "smb2": "SMB2",
    "nbss": "NetBIOS",
    "netbios": "NetBIOS",
    "nbns": "NBNS",
    "rdp": "RDP",
    "rdpudp": "RDPUDP",
    "ms-rdp": "RDP",
    "data": "DATA",
    "quic": "QUIC",
    "websocket": "WebSocket",
    "mqtt": "MQTT",
    "amqp": "AMQP",
    "unknown": "Unknown",
}

UNKNOWN_PROTOCOL = "Unknown"

# Most specific first; the first layer present wins.
PROTOCOL_PRIORITY: tuple[str, ...] = (
    "HTTP",
    "HTTPS",
    "TLS",
    "SSL",
    "DNS",
    "SSH",
    "RDP",
    "RDPUDP",
    "SMB",
    "SMB2",
    "FTP",
    "SMTP",
    "DHCP",
    "NTP",
    "QUIC",
    "WebSocket",
    "ICMP",
    "ARP",
    "TCP",
    "UDP",
    "IP",
    "IPv4",
    "IPv6",
)

# ---------------------------------------------------------------------------
# Result formatting
# ---------------------------------------------------------------------------
NOT_AVAILABLE = "N/A"
CONVERSATION_SEPARATOR = " ↔ "
PORT_ARROW = "→"

__all__ = [
    "PROTOCOL_DISPLAY_NAMES",
    "UNKNOWN_PROTOCOL",
    "PROTOCOL_PRIORITY",
    "NOT_AVAILABLE",
    "CONVERSATION_SEPARATOR",
    "PORT_ARROW",
]
