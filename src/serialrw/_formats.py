import struct

int8 = struct.Struct(">b")
int16 = struct.Struct(">h")
int32 = struct.Struct(">l")
int64 = struct.Struct(">q")
uint8 = struct.Struct(">B")
uint16 = struct.Struct(">H")
uint32 = struct.Struct(">L")
uint64 = struct.Struct(">Q")
float32 = struct.Struct(">f")
float64 = struct.Struct(">d")
