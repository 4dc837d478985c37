from evtol_sim.api.report import main

raise SystemExit(main())
