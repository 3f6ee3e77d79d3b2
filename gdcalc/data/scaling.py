# 广东新高考 再选科目 等级赋分对照表
# [来源: 各市联考公布的赋分换算表, 按原始分从高到低录入]
#
# 每科为 (原始分, 赋分) 有序序列, 只收录公布的节点, 表内缺失的分数由引擎取最近节点.
# 录入顺序即查找顺序 (等距时取先出现的节点), 不要重排.

guangzhou_2025_mock_1 = {
    # [化学]
    "化学": (
        (97, 100), (93, 98), (90, 96), (87, 94), (84, 91),
        (81, 88.5), (78, 86), (75, 83.5), (72, 81), (69, 78),
        (66, 75), (63, 72), (60, 69), (57, 66), (54, 63),
        (51, 60), (48, 57), (45, 54), (42, 51), (39, 48),
        (36, 45), (33, 42), (30, 39.5), (26, 36), (22, 33),
        (18, 30),
    ),
    # [生物]
    "生物": (
        (95, 100), (92, 97.5), (89, 95), (86, 92), (83, 89),
        (80, 86.5), (77, 84), (74, 81.5), (71, 79), (68, 76),
        (65, 73), (62, 70), (59, 67), (56, 64), (53, 61),
        (50, 58), (47, 55), (44, 52), (41, 49), (38, 46),
        (35, 43), (32, 40), (28, 37), (24, 34), (20, 31),
        (17, 30),
    ),
    # [政治]
    "政治": (
        (92, 100), (89, 97), (86, 94), (84, 91.5), (82, 89),
        (80, 86.5), (78, 84), (76, 82), (73, 79), (70, 76),
        (67, 73), (64, 70.5), (61, 68), (58, 65), (55, 62),
        (52, 59), (49, 56), (46, 53), (43, 50), (40, 47),
        (37, 44), (34, 41), (30, 38), (26, 35), (22, 32),
        (19, 30),
    ),
    # [地理]
    "地理": (
        (94, 100), (91, 97), (88, 94.5), (85, 92), (82, 89),
        (79, 86), (76, 83), (73, 80), (70, 77.5), (67, 75),
        (64, 72), (61, 69), (58, 66), (55, 63), (52, 60),
        (49, 57), (46, 54), (43, 51), (40, 48), (37, 45),
        (34, 42), (31, 39), (27, 36), (23, 33), (20, 30),
    ),
}

shenzhen_2025_mock_1 = {
    # [化学] 试卷偏难, 节点整体下移
    "化学": (
        (92, 100), (88, 97.5), (85, 95), (82, 92.5), (79, 90),
        (76, 87), (73, 84.5), (70, 82), (67, 79), (64, 76),
        (61, 73), (58, 70), (55, 67), (52, 64), (49, 61),
        (46, 58), (43, 55), (40, 52), (37, 49), (34, 46),
        (31, 43), (28, 40), (25, 37), (21, 34), (17, 31),
        (14, 30),
    ),
    # [生物]
    "生物": (
        (90, 100), (87, 97), (84, 94.5), (81, 92), (78, 89),
        (75, 86), (72, 83), (69, 80.5), (66, 78), (63, 75),
        (60, 72), (57, 69), (54, 66), (51, 63), (48, 60),
        (45, 57), (42, 54), (39, 51), (36, 48), (33, 45),
        (30, 42), (26, 38.5), (22, 35), (18, 32), (15, 30),
    ),
    # [政治]
    "政治": (
        (90, 100), (87, 97.5), (84, 95), (81, 92), (79, 89.5),
        (77, 87), (75, 84.5), (72, 82), (69, 79), (66, 76),
        (63, 73), (60, 70), (57, 67), (54, 64), (51, 61),
        (48, 58), (45, 55), (42, 52), (39, 49), (36, 46),
        (33, 43), (29, 39.5), (25, 36), (21, 33), (17, 30),
    ),
    # [地理]
    "地理": (
        (91, 100), (88, 97.5), (85, 95), (82, 92), (79, 89),
        (76, 86), (73, 83), (70, 80), (67, 77), (64, 74),
        (61, 71), (58, 68), (55, 65), (52, 62), (49, 59),
        (46, 56), (43, 53), (40, 50), (37, 47), (34, 44),
        (31, 41), (28, 38), (24, 35), (20, 32), (16, 30),
    ),
}

# 数据集名称 -> 各科对照表 (插入顺序即下拉框顺序, 第一项为默认)
scaling_datasets = {
    "2025 广州一模": guangzhou_2025_mock_1,
    "2025 深圳一模": shenzhen_2025_mock_1,
}
