from dfzk.utils.groups import get_random_num, get_random_int, ensure_bn
