from boggle_solver.cli import main

raise SystemExit(main())
