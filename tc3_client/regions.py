"""Region identifiers accepted in the X-TC-Region header."""

BANGKOK = "ap-bangkok"
BEIJING = "ap-beijing"
CHENGDU = "ap-chengdu"
CHONGQING = "ap-chongqing"
GUANGZHOU = "ap-guangzhou"
HONG_KONG = "ap-hongkong"
JAKARTA = "ap-jakarta"
MUMBAI = "ap-mumbai"
NANJING = "ap-nanjing"
SEOUL = "ap-seoul"
SHANGHAI = "ap-shanghai"
SHANGHAI_FSI = "ap-shanghai-fsi"
SHENZHEN_FSI = "ap-shenzhen-fsi"
SINGAPORE = "ap-singapore"
TOKYO = "ap-tokyo"
FRANKFURT = "eu-frankfurt"
ASHBURN = "na-ashburn"
SILICON_VALLEY = "na-siliconvalley"
TORONTO = "na-toronto"
SAO_PAULO = "sa-saopaulo"
