"""
パスタリー（Passtally）のルールエンジン
"""
