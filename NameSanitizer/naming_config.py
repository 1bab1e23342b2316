"""
命名配置（默认保持 PHP 生成器的行为）：
非法/关键字名称前缀: a      -> class => aClass
类名/类型冲突后缀:   Custom -> array => arrayCustom

这些常量在每次调用时读取，可在调用前修改以适配项目需求。
"""
NAME_PREFIX = "a"
NAME_SUFFIX = "Custom"

# 未传入 RenameLog 时，是否在名称被改写时立即打印 warn
WARN_ON_RENAME = True
