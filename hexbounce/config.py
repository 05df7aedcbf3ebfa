# hexbounce/config.py
# 각종 물리 상수 및 기본 설정값 정의
# 화면 좌표계 기준 (단위: 픽셀, 초) / +y 방향이 아래쪽

# 중력 가속도 [px/s^2]
GRAVITY = 500.0

# 마찰 계수 (틱마다 속도에 곱해짐, deltaTime과 무관)
FRICTION = 0.98

# 반발 감쇠 계수 (벽 충돌 시 에너지 손실)
BOUNCE_DAMPING = 0.85

# 최소 속도 임계값 [px/s] (이보다 작으면 0으로 처리)
MIN_VELOCITY = 0.1

# 육각형 내부로 밀어넣을 때 남겨두는 안전 거리 [px]
SAFE_MARGIN = 10.0

# 한 틱의 최대 시간 간격 [s] (벽 관통 방지)
MAX_DELTA_TIME = 0.016

# 클릭 충격량 크기 [px/s]
CLICK_IMPULSE = 300.0

# 리셋 시 중심에서 위쪽으로 띄우는 거리 [px]
RESET_OFFSET_Y = 50.0

# 기본 화면/육각형/공 설정
CANVAS_WIDTH = 600
CANVAS_HEIGHT = 600
HEXAGON_RADIUS = 200.0
ROTATION_SPEED = 0.02 # [rad/tick]
MAX_ROTATION_SPEED = 0.1
BALL_RADIUS = 8.0

# 점수 계산
BOUNCE_SCORE = 10
SPEED_BONUS_STEP = 10.0
