import struct

import pytest

from potato.vtx import Strip, VTXFile, STRIP_IS_TRILIST, STRIP_IS_TRISTRIP


def header(checksum, num_body_parts, body_part_offset):
    return struct.pack("<IIHHIIIIII", 7, 24, 53, 9, 3, checksum, 1, 0, num_body_parts, body_part_offset)


def build_vtx(checksum, vert_ids, indices, strips):
    """One body part, model, LOD and mesh holding a single strip group."""
    out = bytearray(header(checksum, 1, 36))
    out += struct.pack("<II", 1, 8)          # body part at 36 -> model at 44
    out += struct.pack("<II", 1, 8)          # model at 44 -> lod at 52
    out += struct.pack("<IIf", 1, 12, 0.0)   # lod at 52 -> mesh at 64
    out += struct.pack("<IIB", 1, 9, 0)      # mesh at 64 -> strip group at 73
    vert_ofs = 25
    index_ofs = vert_ofs + 9 * len(vert_ids)
    strip_ofs = index_ofs + 2 * len(indices)
    out += struct.pack("<IIIIIIB", len(vert_ids), vert_ofs, len(indices), index_ofs, len(strips), strip_ofs, 0)
    for vid in vert_ids:
        out += struct.pack("<3BBH3b", 0, 1, 2, 1, vid, 0, -1, -1)
    out += struct.pack(f"<{len(indices)}H", *indices)
    for num, ofs, flags in strips:
        out += struct.pack("<IIIIhBII", num, ofs, 0, 0, 1, flags, 0, 0)
    return bytes(out)


def test_empty_file_keeps_checksum():
    parsed = VTXFile.from_bytes(header(4242, 0, 36))
    assert parsed.checksum == 4242
    assert parsed.body_parts == []


def test_strip_group_round_trip():
    vert_ids = [10, 11, 12, 500]
    indices = [0, 1, 2, 2, 1, 3]
    strips = [(6, 0, STRIP_IS_TRILIST), (3, 3, STRIP_IS_TRISTRIP)]
    parsed = VTXFile.from_bytes(build_vtx(99, vert_ids, indices, strips))

    assert parsed.checksum == 99
    group = parsed.body_parts[0].models[0].lods[0].meshes[0].strip_groups[0]
    assert group.vert_ids == vert_ids
    assert group.indices == indices
    assert group.strips == [Strip(6, 0, STRIP_IS_TRILIST), Strip(3, 3, STRIP_IS_TRISTRIP)]


def test_hierarchy_counts():
    parsed = VTXFile.from_bytes(build_vtx(1, [0], [0], [(1, 0, STRIP_IS_TRILIST)]))
    assert len(parsed.body_parts) == 1
    assert len(parsed.body_parts[0].models) == 1
    assert len(parsed.body_parts[0].models[0].lods) == 1
    assert len(parsed.body_parts[0].models[0].lods[0].meshes) == 1


def test_strip_flag_properties():
    trilist = Strip(3, 0, STRIP_IS_TRILIST)
    tristrip = Strip(3, 0, STRIP_IS_TRISTRIP)
    assert trilist.is_trilist and not trilist.is_tristrip
    assert tristrip.is_tristrip and not tristrip.is_trilist


def test_truncated_header_raises():
    with pytest.raises(ValueError):
        VTXFile.from_bytes(b"\x07\x00\x00\x00")


def test_truncated_body_raises():
    data = build_vtx(1, [1, 2, 3], [0, 1, 2], [(3, 0, STRIP_IS_TRILIST)])
    with pytest.raises(ValueError):
        VTXFile.from_bytes(data[:-10])