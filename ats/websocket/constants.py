# client -> server
(AUTH, PRESENCE, PONG) = ('auth', 'presence', 'pong')

# server -> client
(CONNECTION, AUTH_SUCCESS, PRESENCE_UPDATE, USER_OFFLINE, PING) = (
    'connection', 'auth_success', 'presence_update', 'user_offline', 'ping'
)

(USER_CREATED, JOB_CREATED, APPLICANT_CREATED) = (
    'user_created', 'job_created', 'applicant_created'
)
NOTIFICATION_EVENT_TYPES = (USER_CREATED, JOB_CREATED, APPLICANT_CREATED)

# presence
(ONLINE, ACTIVE, IDLE, OFFLINE) = ('online', 'active', 'idle', 'offline')

PRESENCE_STATUS_CHOICES = (
    (ONLINE, 'Online'),
    (ACTIVE, 'Active'),
    (IDLE, 'Idle'),
    (OFFLINE, 'Offline'),
)

CONNECTION_GREETING = 'Connected to ATS WebSocket server'

# channel layer event types handled by the consumer
(REALTIME_MESSAGE, REALTIME_PROBE, REALTIME_TERMINATE) = (
    'realtime.message', 'realtime.probe', 'realtime.terminate'
)
