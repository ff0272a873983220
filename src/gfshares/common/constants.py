FIELD_ORDER = 256

X_OFFSET = 0
Y_OFFSET = 1
MIN_SHARE_LENGTH = Y_OFFSET
