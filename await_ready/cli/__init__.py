from .await_ready_command import (
    await_ready_command as await_ready_command,
    main as main,
    run_await_ready as run_await_ready,
)
