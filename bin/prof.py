from cProfile import run
from treebench.harness import run_trial
from treebench.record import Record

records = [Record(title=f"title{i:05d}", rating=i % 10) for i in range(0, 5000)]

run(
    'run_trial("synthetic", records)',
    filename="tmp/treebench.prof",
)
