"""Bookmark blob taken from a Safari Downloads.plist (DownloadEntryBookmarkBlob)."""

SAFARI_DOWNLOAD = bytes.fromhex(
    '626f6f6bcc0200000000041030000000d90a6e9b8f2b06008bc8a8e62ad61666'
    '67e4709f8da3141b2453e9b239d05969c8010000040000000303000000180028'
    '0500000001010000557365727300000008000000010100007075666679636964'
    '0900000001010000446f776e6c6f6164730000001c00000001010000706f7765'
    '727368656c6c2d372e322e342d6f73782d7836342e706b671000000001060000'
    '1000000020000000300000004400000008000000040300004f53000000000000'
    '08000000040300000b8005000000000008000000040300003e80050000000000'
    '0800000004030000d8c23d020000000010000000010600008000000090000000'
    'a0000000b0000000080000000004000041c4300fa209913a1800000001020000'
    '01000000000000000f0000000000000000000000000000000800000004030000'
    '02000000000000000400000003030000f5010000080000000109000066696c65'
    '3a2f2f2f0c000000010100004d6163696e746f73682048440800000004030000'
    '0070c4d0d1010000080000000004000041c3e504518000002400000001010000'
    '39364642343143302d364345392d344441322d383433352d3335424331394337'
    '3335413318000000010200008100000001000000ef1300000100000000000000'
    '0000000001000000010100002f0000000000000001050000cc000000feffffff'
    '01000000000000001000000004100000680000000000000005100000c0000000'
    '0000000010100000e80000000000000040100000d80000000000000002200000'
    'b401000000000000052000002401000000000000102000003401000000000000'
    '1120000068010000000000001220000048010000000000001320000058010000'
    '0000000020200000940100000000000030200000c00100000000000001c00000'
    '080100000000000011c00000200000000000000012c000001801000000000000'
    '10d000000400000000000000'
)
