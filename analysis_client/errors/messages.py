"""User-facing error messages per locale, keyed by origin then code."""

from analysis_client.errors.exceptions import ErrorOrigin

GLOBAL_DEFAULTS: dict[str, str] = {
    "en": "Unknown error",
    "zh-CN": "未知错误",
}

MESSAGES: dict[str, dict[ErrorOrigin, dict[str, str]]] = {
    "en": {
        ErrorOrigin.FILE: {
            "default": "File processing error",
            "notFound": "File not found",
            "invalidType": "Invalid file type",
            "tooLarge": "File is too large",
            "readError": "Failed to read the file",
        },
        ErrorOrigin.ANALYSIS: {
            "default": "Analysis failed",
            "initFailed": "The analysis engine failed to start",
            "renderFailed": "Failed to render the report",
        },
        ErrorOrigin.NETWORK: {
            "default": "Network request failed",
            "notFound": "The requested resource was not found",
        },
        ErrorOrigin.DATABASE: {
            "default": "Database operation failed",
            "connectionFailed": "Could not open the local cache",
            "transactionFailed": "Local cache transaction failed",
        },
        ErrorOrigin.VALIDATION: {
            "default": "Input validation error",
            "emptyOptions": "Please enter analysis options",
            "noFile": "Please select a csTimer data file",
            "invalidFileType": "Please select a .txt file",
        },
    },
    "zh-CN": {
        ErrorOrigin.FILE: {
            "default": "文件处理错误",
            "notFound": "找不到文件",
            "invalidType": "无效的文件类型",
            "tooLarge": "文件太大",
            "readError": "文件读取错误",
        },
        ErrorOrigin.ANALYSIS: {
            "default": "分析过程出错",
            "initFailed": "分析引擎启动失败",
            "renderFailed": "报告渲染失败",
        },
        ErrorOrigin.NETWORK: {
            "default": "网络请求错误",
            "notFound": "找不到请求的资源",
        },
        ErrorOrigin.DATABASE: {
            "default": "数据库操作错误",
            "connectionFailed": "无法打开本地缓存",
            "transactionFailed": "本地缓存事务失败",
        },
        ErrorOrigin.VALIDATION: {
            "default": "输入验证错误",
            "emptyOptions": "请输入分析选项",
            "noFile": "请选择csTimer数据文件",
            "invalidFileType": "请选择.txt文件",
        },
    },
}
