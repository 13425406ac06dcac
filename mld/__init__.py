"""
Backend API cho website MLD: tài khoản, sản phẩm và tin tức
"""
