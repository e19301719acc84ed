"""packetio wire constants and frame size presets."""

# ----------------------------------------------------------------------------
# Wire format
# ----------------------------------------------------------------------------

LENGTH_PREFIX_SIZE = 4  # u32 payload length
LENGTH_FORMAT = ">I"  # big-endian, unsigned
MAX_PAYLOAD_LENGTH = 0xFFFFFFFF  # largest length the prefix can carry

# ----------------------------------------------------------------------------
# I/O tuning
# ----------------------------------------------------------------------------

# Upper bound for a single read call; payload buffers grow as bytes arrive
READ_CHUNK_SIZE = 64 << 10  # 64 KiB

# ----------------------------------------------------------------------------
# Frame size limits (opt-in, see ``max_frame_bytes``)
# ----------------------------------------------------------------------------

DEFAULT_MAX_FRAME_BYTES = 1 << 20  # 1 MiB
WAN_MAX_FRAME_BYTES = 512 << 10  # 512 KiB
LAN_MAX_FRAME_BYTES = 4 << 20  # 4 MiB
