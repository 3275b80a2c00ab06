"""Membership test for the Unicode ID_Continue derived core property (Unicode 15.1.0)."""

from __future__ import annotations

from bisect import bisect_right
from typing import Tuple

from glyn.id_start import is_unicode_id_start

UNICODE_VERSION = "15.1.0"

# Only the ID_Continue ranges that are not already ID_Start ranges.
_ID_CONTINUE_DATA = """
0030..0039 005F 00B7 0300..036F 0387 0483..0487 0591..05BD 05BF 05C1..05C2
05C4..05C5 05C7 0610..061A 064B..065F 0660..0669 0670 06D6..06DC 06DF..06E4
06E7..06E8 06EA..06ED 06F0..06F9 0711 0730..074A 07A6..07B0 07C0..07C9
07EB..07F3 07FD 0816..0819 081B..0823 0825..0827 0829..082D 0859..085B
0898..089F 08CA..08E1 08E3..0902 0903 093A 093B 093C 093E..0940 0941..0948
0949..094C 094D 094E..094F 0951..0957 0962..0963 0966..096F 0981 0982..0983
09BC 09BE..09C0 09C1..09C4 09C7..09C8 09CB..09CC 09CD 09D7 09E2..09E3
09E6..09EF 09FE 0A01..0A02 0A03 0A3C 0A3E..0A40 0A41..0A42 0A47..0A48
0A4B..0A4D 0A51 0A66..0A6F 0A70..0A71 0A75 0A81..0A82 0A83 0ABC 0ABE..0AC0
0AC1..0AC5 0AC7..0AC8 0AC9 0ACB..0ACC 0ACD 0AE2..0AE3 0AE6..0AEF 0AFA..0AFF
0B01 0B02..0B03 0B3C 0B3E 0B3F 0B40 0B41..0B44 0B47..0B48 0B4B..0B4C 0B4D
0B55..0B56 0B57 0B62..0B63 0B66..0B6F 0B82 0BBE..0BBF 0BC0 0BC1..0BC2
0BC6..0BC8 0BCA..0BCC 0BCD 0BD7 0BE6..0BEF 0C00 0C01..0C03 0C04 0C3C
0C3E..0C40 0C41..0C44 0C46..0C48 0C4A..0C4D 0C55..0C56 0C62..0C63 0C66..0C6F
0C81 0C82..0C83 0CBC 0CBE 0CBF 0CC0..0CC4 0CC6 0CC7..0CC8 0CCA..0CCB
0CCC..0CCD 0CD5..0CD6 0CE2..0CE3 0CE6..0CEF 0CF3 0D00..0D01 0D02..0D03
0D3B..0D3C 0D3E..0D40 0D41..0D44 0D46..0D48 0D4A..0D4C 0D4D 0D57 0D62..0D63
0D66..0D6F 0D81 0D82..0D83 0DCA 0DCF..0DD1 0DD2..0DD4 0DD6 0DD8..0DDF
0DE6..0DEF 0DF2..0DF3 0E31 0E34..0E3A 0E47..0E4E 0E50..0E59 0EB1 0EB4..0EBC
0EC8..0ECE 0ED0..0ED9 0F18..0F19 0F20..0F29 0F35 0F37 0F39 0F3E..0F3F
0F71..0F7E 0F7F 0F80..0F84 0F86..0F87 0F8D..0F97 0F99..0FBC 0FC6
101FD 102B..102C 102D..1030 102E0 1031 1032..1037 10376..1037A 1038
1039..103A 103B..103C 103D..103E 1040..1049 104A0..104A9 1056..1057
1058..1059 105E..1060 1062..1064 1067..106D 1071..1074 1082 1083..1084
1085..1086 1087..108C 108D 108F 1090..1099 109A..109C 109D 10A01..10A03
10A05..10A06 10A0C..10A0F 10A38..10A3A 10A3F 10AE5..10AE6 10D24..10D27
10D30..10D39 10EAB..10EAC 10EFD..10EFF 10F46..10F50 10F82..10F85 11000 11001
11002 11038..11046 11066..1106F 11070 11073..11074 1107F..11081 11082
110B0..110B2 110B3..110B6 110B7..110B8 110B9..110BA 110C2 110F0..110F9
11100..11102 11127..1112B 1112C 1112D..11134 11136..1113F 11145..11146 11173
11180..11181 11182 111B3..111B5 111B6..111BE 111BF..111C0 111C9..111CC 111CE
111CF 111D0..111D9 1122C..1122E 1122F..11231 11232..11233 11234 11235
11236..11237 1123E 11241 112DF 112E0..112E2 112E3..112EA 112F0..112F9
11300..11301 11302..11303 1133B..1133C 1133E..1133F 11340 11341..11344
11347..11348 1134B..1134D 11357 11362..11363 11366..1136C 11370..11374
11435..11437 11438..1143F 11440..11441 11442..11444 11445 11446 11450..11459
1145E 114B0..114B2 114B3..114B8 114B9 114BA 114BB..114BE 114BF..114C0 114C1
114C2..114C3 114D0..114D9 115AF..115B1 115B2..115B5 115B8..115BB 115BC..115BD
115BE 115BF..115C0 115DC..115DD 11630..11632 11633..1163A 1163B..1163C 1163D
1163E 1163F..11640 11650..11659 116AB 116AC 116AD 116AE..116AF 116B0..116B5
116B6 116B7 116C0..116C9 1171D..1171F 11720..11721 11722..11725 11726
11727..1172B 11730..11739 1182C..1182E 1182F..11837 11838 11839..1183A
118E0..118E9 11930..11935 11937..11938 1193B..1193C 1193D 1193E 11940 11942
11943 11950..11959 119D1..119D3 119D4..119D7 119DA..119DB 119DC..119DF 119E0
119E4 11A01..11A0A 11A33..11A38 11A39 11A3B..11A3E 11A47 11A51..11A56
11A57..11A58 11A59..11A5B 11A8A..11A96 11A97 11A98..11A99 11C2F 11C30..11C36
11C38..11C3D 11C3E 11C3F 11C50..11C59 11C92..11CA7 11CA9 11CAA..11CB0 11CB1
11CB2..11CB3 11CB4 11CB5..11CB6 11D31..11D36 11D3A 11D3C..11D3D 11D3F..11D45
11D47 11D50..11D59 11D8A..11D8E 11D90..11D91 11D93..11D94 11D95 11D96 11D97
11DA0..11DA9 11EF3..11EF4 11EF5..11EF6 11F00..11F01 11F03 11F34..11F35
11F36..11F3A 11F3E..11F3F 11F40 11F41 11F42 11F50..11F59 13440 13447..13455
135D..135F 1369..1371 16A60..16A69 16AC0..16AC9 16AF0..16AF4 16B30..16B36
16B50..16B59 16F4F 16F51..16F87 16F8F..16F92 16FE4 16FF0..16FF1 1712..1714
1715 1732..1733 1734 1752..1753 1772..1773 17B4..17B5 17B6 17B7..17BD
17BE..17C5 17C6 17C7..17C8 17C9..17D3 17DD 17E0..17E9 180B..180D 180F
1810..1819 18A9 1920..1922 1923..1926 1927..1928 1929..192B 1930..1931 1932
1933..1938 1939..193B 1946..194F 19D0..19D9 19DA 1A17..1A18 1A19..1A1A 1A1B
1A55 1A56 1A57 1A58..1A5E 1A60 1A61 1A62 1A63..1A64 1A65..1A6C 1A6D..1A72
1A73..1A7C 1A7F 1A80..1A89 1A90..1A99 1AB0..1ABD 1ABF..1ACE 1B00..1B03 1B04
1B34 1B35 1B36..1B3A 1B3B 1B3C 1B3D..1B41 1B42 1B43..1B44 1B50..1B59
1B6B..1B73 1B80..1B81 1B82 1BA1 1BA2..1BA5 1BA6..1BA7 1BA8..1BA9 1BAA
1BAB..1BAD 1BB0..1BB9 1BC9D..1BC9E 1BE6 1BE7 1BE8..1BE9 1BEA..1BEC 1BED 1BEE
1BEF..1BF1 1BF2..1BF3 1C24..1C2B 1C2C..1C33 1C34..1C35 1C36..1C37 1C40..1C49
1C50..1C59 1CD0..1CD2 1CD4..1CE0 1CE1 1CE2..1CE8 1CED 1CF00..1CF2D
1CF30..1CF46 1CF4 1CF7 1CF8..1CF9 1D165..1D166 1D167..1D169 1D16D..1D172
1D17B..1D182 1D185..1D18B 1D1AA..1D1AD 1D242..1D244 1D7CE..1D7FF 1DA00..1DA36
1DA3B..1DA6C 1DA75 1DA84 1DA9B..1DA9F 1DAA1..1DAAF 1DC0..1DFF 1E000..1E006
1E008..1E018 1E01B..1E021 1E023..1E024 1E026..1E02A 1E08F 1E130..1E136
1E140..1E149 1E2AE 1E2EC..1E2EF 1E2F0..1E2F9 1E4EC..1E4EF 1E4F0..1E4F9
1E8D0..1E8D6 1E944..1E94A 1E950..1E959 1FBF0..1FBF9 200C..200D 203F..2040
2054 20D0..20DC 20E1 20E5..20F0 2CEF..2CF1 2D7F 2DE0..2DFF 302A..302D
302E..302F 3099..309A 30FB A620..A629 A66F A674..A67D A69E..A69F A6F0..A6F1
A802 A806 A80B A823..A824 A825..A826 A827 A82C A880..A881 A8B4..A8C3
A8C4..A8C5 A8D0..A8D9 A8E0..A8F1 A8FF A900..A909 A926..A92D A947..A951
A952..A953 A980..A982 A983 A9B3 A9B4..A9B5 A9B6..A9B9 A9BA..A9BB A9BC..A9BD
A9BE..A9C0 A9D0..A9D9 A9E5 A9F0..A9F9 AA29..AA2E AA2F..AA30 AA31..AA32
AA33..AA34 AA35..AA36 AA43 AA4C AA4D AA50..AA59 AA7B AA7C AA7D AAB0
AAB2..AAB4 AAB7..AAB8 AABE..AABF AAC1 AAEB AAEC..AAED AAEE..AAEF AAF5 AAF6
ABE3..ABE4 ABE5 ABE6..ABE7 ABE8 ABE9..ABEA ABEC ABED ABF0..ABF9 E0100..E01EF
FB1E FE00..FE0F FE20..FE2F FE33..FE34 FE4D..FE4F FF10..FF19 FF3F FF65
"""


def _parse_ranges(data: str) -> Tuple[Tuple[int, int], ...]:
    ranges = []
    for token in data.split():
        start, _, end = token.partition("..")
        ranges.append((int(start, 16), int(end or start, 16)))
    return tuple(sorted(ranges))


ID_CONTINUE_RANGES: Tuple[Tuple[int, int], ...] = _parse_ranges(_ID_CONTINUE_DATA)
_STARTS: Tuple[int, ...] = tuple(start for start, _ in ID_CONTINUE_RANGES)


def is_unicode_id_continue(ch: str) -> bool:
    """Return True if the character has the ID_Continue property."""
    if is_unicode_id_start(ch):
        return True
    cp = ord(ch)
    index = bisect_right(_STARTS, cp) - 1
    return index >= 0 and cp <= ID_CONTINUE_RANGES[index][1]