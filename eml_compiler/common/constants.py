# 기본 태그 화이트리스트 (설정으로 덮어쓸 수 있음)
DEFAULT_VALID_TAGS = frozenset({"view"})

# applier 없이 그대로 보존되는 속성
PASSTHROUGH_ATTRIBUTES = frozenset({"style", "class"})

# 트레이스 출력 기본 파일명
DEFAULT_TRACE_FILE = "trace.json"

# 트레이서가 보관하는 최대 이벤트 수 (오래된 것부터 버림)
MAX_TRACE_EVENTS = 100_000
