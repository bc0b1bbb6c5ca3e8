"""Bundled QQ face table (face name -> face id)."""

FACE_IDS: dict[str, int] = {
    "微笑": 14,
    "撇嘴": 1,
    "色": 2,
    "发呆": 3,
    "得意": 4,
    "流泪": 5,
    "害羞": 6,
    "闭嘴": 7,
    "睡": 8,
    "大哭": 9,
    "尴尬": 10,
    "发怒": 11,
    "调皮": 12,
    "呲牙": 13,
    "惊讶": 0,
    "难过": 15,
    "酷": 16,
    "冷汗": 96,
    "抓狂": 18,
    "吐": 19,
    "偷笑": 20,
    "可爱": 21,
    "白眼": 22,
    "傲慢": 23,
    "饥饿": 24,
    "困": 25,
    "惊恐": 26,
    "流汗": 27,
    "憨笑": 28,
    "大兵": 29,
    "奋斗": 30,
    "咒骂": 31,
    "疑问": 32,
    "嘘": 33,
    "晕": 34,
    "折磨": 35,
    "衰": 36,
    "骷髅": 37,
    "敲打": 38,
    "再见": 39,
    "擦汗": 97,
    "抠鼻": 98,
    "鼓掌": 99,
    "糗大了": 100,
    "坏笑": 101,
    "左哼哼": 102,
    "右哼哼": 103,
    "哈欠": 104,
    "鄙视": 105,
    "委屈": 106,
    "快哭了": 107,
    "阴险": 108,
    "亲亲": 109,
    "吓": 110,
    "可怜": 111,
    "眨眼睛": 172,
    "笑哭": 182,
    "doge": 179,
    "泪奔": 173,
    "无奈": 174,
    "托腮": 212,
    "卖萌": 175,
    "斜眼笑": 178,
    "喷血": 177,
    "惊喜": 180,
    "骚扰": 181,
    "小纠结": 176,
    "我最美": 183,
    "菜刀": 112,
    "西瓜": 89,
    "啤酒": 113,
    "篮球": 114,
    "乒乓": 115,
    "茶": 171,
    "咖啡": 60,
    "饭": 61,
    "猪头": 46,
    "玫瑰": 63,
    "凋谢": 64,
    "示爱": 116,
    "爱心": 66,
    "心碎": 67,
    "蛋糕": 53,
    "闪电": 54,
    "炸弹": 55,
    "刀": 56,
    "足球": 57,
    "瓢虫": 117,
    "便便": 59,
    "月亮": 75,
    "太阳": 74,
    "礼物": 69,
    "拥抱": 49,
    "强": 76,
    "弱": 77,
    "握手": 78,
    "胜利": 79,
    "抱拳": 118,
    "勾引": 119,
    "拳头": 120,
    "差劲": 121,
    "爱你": 122,
    "NO": 123,
    "OK": 124,
    "爱情": 42,
    "飞吻": 85,
    "跳跳": 43,
    "发抖": 41,
    "怄火": 86,
    "转圈": 125,
    "磕头": 126,
    "回头": 127,
    "跳绳": 128,
    "挥手": 129,
    "激动": 130,
    "街舞": 131,
    "献吻": 132,
    "左太极": 133,
    "右太极": 134,
    "双喜": 136,
    "鞭炮": 137,
    "灯笼": 138,
    "K歌": 140,
    "喝彩": 144,
    "祈祷": 145,
    "爆筋": 146,
    "棒棒糖": 147,
    "喝奶": 148,
    "飞机": 151,
    "钞票": 158,
    "药": 168,
    "手枪": 169,
    "蛋": 188,
    "红包": 192,
    "河蟹": 184,
    "羊驼": 185,
    "菊花": 190,
    "幽灵": 187,
    "大笑": 193,
    "不开心": 194,
    "冷漠": 197,
    "呃": 198,
    "好棒": 199,
    "拜托": 200,
    "点赞": 201,
    "无聊": 202,
    "托脸": 203,
    "吃": 204,
    "送花": 205,
    "害怕": 206,
    "花痴": 207,
    "小样儿": 208,
    "飙泪": 210,
    "我不看": 211,
}

FACE_NAMES: dict[int, str] = {face_id: name for name, face_id in FACE_IDS.items()}
